from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user, get_optional_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.common import SuccessResponse
from cinecircle.schemas.custom_list import (
    CustomListCreate, CustomListDetailResponse, CustomListItemCreate,
    CustomListItemResponse, CustomListResponse, CustomListUpdate
)
from cinecircle.services.list_service import ListService

router = APIRouter(prefix="/lists", tags=["lists"])

@router.get("", response_model=List[CustomListResponse])
def list_lists(
    user_id: Optional[str] = Query(None),
    public_only: bool = Query(False),
    current_user_id: Optional[str] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """A user's lists, or every public list when no user is given"""
    try:
        return ListService(db).list_lists(current_user_id, user_id=user_id, public_only=public_only)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=CustomListResponse, status_code=status.HTTP_201_CREATED)
def create_list(
    list_data: CustomListCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return ListService(db).create_list(current_user_id, list_data)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{list_id}", response_model=CustomListDetailResponse)
def get_list(
    list_id: str,
    current_user_id: Optional[str] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        return ListService(db).get_list(current_user_id, list_id)
    except Exception as e:
        raise handle_exception(e)

@router.patch("/{list_id}", response_model=CustomListResponse)
def update_list(
    list_id: str,
    list_data: CustomListUpdate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return ListService(db).update_list(current_user_id, list_id, list_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{list_id}", response_model=SuccessResponse)
def delete_list(
    list_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        ListService(db).delete_list(current_user_id, list_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)

@router.post("/{list_id}/items", response_model=CustomListItemResponse, status_code=status.HTTP_201_CREATED)
def add_list_item(
    list_id: str,
    item_data: CustomListItemCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return ListService(db).add_item(current_user_id, list_id, item_data.media_id)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{list_id}/items/{media_id}", response_model=SuccessResponse)
def remove_list_item(
    list_id: str,
    media_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        ListService(db).remove_item(current_user_id, list_id, media_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)
