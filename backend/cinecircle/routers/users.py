from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from cinecircle.db import get_db
from cinecircle.core.auth import Identity, get_token_identity
from cinecircle.core.config import get_settings
from cinecircle.core.enums import WatchlistStatus
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.profile import AutoCreateProfileResponse, ProfileResponse
from cinecircle.schemas.watchlist import WatchlistItemResponse
from cinecircle.services.profile_service import ProfileService
from cinecircle.services.watchlist_service import WatchlistService

router = APIRouter(prefix="/users", tags=["users"])

@router.post("/auto-create-profile", response_model=AutoCreateProfileResponse, status_code=status.HTTP_201_CREATED)
def auto_create_profile(
    response: Response,
    identity: Identity = Depends(get_token_identity),
    db: Session = Depends(get_db)
):
    """Create the caller's profile if it does not exist yet"""
    try:
        profile, created = ProfileService(db).ensure_profile(identity)
        if not created:
            response.status_code = status.HTTP_200_OK
        return AutoCreateProfileResponse(
            message="Profile created" if created else "Profile already exists",
            profile=ProfileResponse.model_validate(profile)
        )
    except Exception as e:
        raise handle_exception(e)

@router.get("/search", response_model=List[ProfileResponse])
def search_users(
    q: Optional[str] = Query(None, description="Matches username, display name or user id"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: Session = Depends(get_db)
):
    try:
        return ProfileService(db).search_users(q, limit or get_settings().USER_SEARCH_LIMIT)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{user_id}/watchlist", response_model=List[WatchlistItemResponse])
def get_user_watchlist(
    user_id: str,
    status_filter: Optional[WatchlistStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db)
):
    """Another user's watchlist, optionally filtered by status"""
    try:
        return WatchlistService(db).get_watchlist(user_id, status_filter.value if status_filter else None)
    except Exception as e:
        raise handle_exception(e)
