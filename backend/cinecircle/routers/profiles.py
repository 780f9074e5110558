from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.profile import ProfileResponse, ProfileStats, ProfileUpsert
from cinecircle.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])

@router.get("", response_model=ProfileResponse)
def get_profile(
    username: Optional[str] = Query(None, description="Username; falls back to user id on miss"),
    user_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Read a profile by username or user id"""
    try:
        return ProfileService(db).get_profile(username=username, user_id=user_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=ProfileResponse)
def upsert_profile(
    profile_data: ProfileUpsert,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the caller's profile; the username can be set once"""
    try:
        return ProfileService(db).upsert_profile(current_user_id, profile_data)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{user_id}/stats", response_model=ProfileStats)
def get_profile_stats(user_id: str, db: Session = Depends(get_db)):
    try:
        return ProfileService(db).get_stats(user_id)
    except Exception as e:
        raise handle_exception(e)
