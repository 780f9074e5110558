from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from cinecircle.db import get_db
from cinecircle.core.auth import get_current_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.notification import (
    MarkReadRequest, MarkReadResponse, NotificationResponse, UnreadCountResponse
)
from cinecircle.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.get("", response_model=List[NotificationResponse])
def get_notifications(
    unread_only: bool = Query(False),
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return NotificationService(db).get_notifications(current_user_id, unread_only=unread_only)
    except Exception as e:
        raise handle_exception(e)

@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return UnreadCountResponse(count=NotificationService(db).get_unread_count(current_user_id))
    except Exception as e:
        raise handle_exception(e)

@router.patch("", response_model=MarkReadResponse)
def mark_notifications_read(
    mark_data: MarkReadRequest,
    current_user_id: str = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mark specific notifications, or all of them, as read"""
    try:
        updated = NotificationService(db).mark_read(
            current_user_id,
            notification_ids=mark_data.notification_ids,
            mark_all_read=mark_data.mark_all_read
        )
        return MarkReadResponse(updated=updated)
    except Exception as e:
        raise handle_exception(e)
