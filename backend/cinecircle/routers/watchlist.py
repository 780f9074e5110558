from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.common import SuccessResponse
from cinecircle.schemas.watchlist import WatchlistItemCreate, WatchlistItemResponse, WatchlistItemUpdate
from cinecircle.services.watchlist_service import WatchlistService

router = APIRouter(prefix="/watchlist", tags=["watchlist"])

@router.get("", response_model=List[WatchlistItemResponse])
def get_watchlist(
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the caller's watchlist, newest first"""
    try:
        return WatchlistService(db).get_watchlist(current_user_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=WatchlistItemResponse, status_code=status.HTTP_201_CREATED)
def add_to_watchlist(
    item_data: WatchlistItemCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a title to the caller's watchlist"""
    try:
        return WatchlistService(db).add_item(current_user_id, item_data)
    except Exception as e:
        raise handle_exception(e)

@router.patch("/{item_id}", response_model=WatchlistItemResponse)
def update_watchlist_item(
    item_id: str,
    item_data: WatchlistItemUpdate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return WatchlistService(db).update_item(current_user_id, item_id, item_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{item_id}", response_model=SuccessResponse)
def remove_from_watchlist(
    item_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        WatchlistService(db).remove_item(current_user_id, item_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)
