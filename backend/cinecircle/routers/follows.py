from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user, get_optional_user
from cinecircle.core.enums import FollowDirection
from cinecircle.core.exceptions import UnauthenticatedException, handle_exception
from cinecircle.schemas.common import SuccessResponse
from cinecircle.schemas.follow import FollowCheckResponse, FollowCreate, FollowResponse
from cinecircle.schemas.profile import ProfileResponse
from cinecircle.services.follow_service import FollowService

router = APIRouter(prefix="/follows", tags=["follows"])

@router.get("", response_model=List[ProfileResponse])
def list_follows(
    user_id: Optional[str] = Query(None, description="Defaults to the caller"),
    direction: FollowDirection = Query(FollowDirection.FOLLOWING, alias="type"),
    current_user_id: Optional[str] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Profiles a user follows, or the user's followers"""
    try:
        target = user_id or current_user_id
        if not target:
            raise UnauthenticatedException("Sign in or pass user_id")
        return FollowService(db).list_connections(target, direction.value)
    except Exception as e:
        raise handle_exception(e)

@router.get("/check", response_model=FollowCheckResponse)
def check_follow(
    user_id: str = Query(..., min_length=1),
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return FollowCheckResponse(is_following=FollowService(db).is_following(current_user_id, user_id))
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=FollowResponse, status_code=status.HTTP_201_CREATED)
def follow_user(
    follow_data: FollowCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return FollowService(db).follow(current_user_id, follow_data.following_id)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{user_id}", response_model=SuccessResponse)
def unfollow_user(
    user_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        FollowService(db).unfollow(current_user_id, user_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)
