from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from cinecircle.db import get_db
from cinecircle.core.auth import get_optional_user
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.activity import ActivityResponse
from cinecircle.services.activity_service import ActivityService

router = APIRouter(prefix="/activities", tags=["activities"])

@router.get("", response_model=List[ActivityResponse])
def get_activity_feed(
    user_id: Optional[str] = Query(None, description="Only this user's activity"),
    limit: Optional[int] = Query(None, description="Page size, defaults to FEED_DEFAULT_LIMIT"),
    offset: int = Query(0),
    current_user_id: Optional[str] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """A user's activity, or the activity of everyone the caller follows"""
    try:
        return ActivityService(db).get_feed(current_user_id, target_user_id=user_id, limit=limit, offset=offset)
    except Exception as e:
        raise handle_exception(e)
