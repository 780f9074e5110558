from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.common import SuccessResponse
from cinecircle.schemas.review import LikeToggleResponse, ReviewCreate, ReviewResponse, ReviewUpdate
from cinecircle.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])

@router.get("", response_model=List[ReviewResponse])
def list_reviews(
    media_id: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Reviews for a title or by a user"""
    try:
        return ReviewService(db).list_reviews(media_id=media_id, user_id=user_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    review_data: ReviewCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return ReviewService(db).create_review(current_user_id, review_data)
    except Exception as e:
        raise handle_exception(e)

@router.patch("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: str,
    review_data: ReviewUpdate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return ReviewService(db).update_review(current_user_id, review_id, review_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{review_id}", response_model=SuccessResponse)
def delete_review(
    review_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        ReviewService(db).delete_review(current_user_id, review_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)

@router.post("/{review_id}/like", response_model=LikeToggleResponse)
def toggle_review_like(
    review_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Like or unlike a review"""
    try:
        return ReviewService(db).toggle_like(current_user_id, review_id)
    except Exception as e:
        raise handle_exception(e)
