from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.comment import CommentCreate, CommentResponse
from cinecircle.schemas.common import SuccessResponse
from cinecircle.services.comment_service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"])

@router.get("", response_model=List[CommentResponse])
def list_comments(
    media_id: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    """Top-level comments for a title with one level of replies"""
    try:
        return CommentService(db).list_comments(media_id)
    except Exception as e:
        raise handle_exception(e)

@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_data: CommentCreate,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return CommentService(db).create_comment(current_user_id, comment_data)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{comment_id}", response_model=SuccessResponse)
def delete_comment(
    comment_id: str,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        CommentService(db).delete_comment(current_user_id, comment_id)
        return SuccessResponse()
    except Exception as e:
        raise handle_exception(e)
