from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse

class NotificationResponse(BaseModel):
    id: str
    user_id: str
    notification_type: str
    from_user_id: Optional[str] = None
    target_id: Optional[str] = None
    target_type: Optional[str] = None
    title: str
    message: Optional[str] = None
    read: bool
    created_at: datetime
    from_user: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True

class MarkReadRequest(BaseModel):
    notification_ids: Optional[List[str]] = None
    mark_all_read: bool = False

class MarkReadResponse(BaseModel):
    success: bool = True
    updated: int

class UnreadCountResponse(BaseModel):
    count: int
