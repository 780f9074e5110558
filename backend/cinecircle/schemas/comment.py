from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse

class CommentCreate(BaseModel):
    media_id: str = Field(..., min_length=1)
    parent_id: Optional[str] = None
    content: str = Field(..., min_length=1, max_length=2000)
    contains_spoilers: bool = False

class CommentResponse(BaseModel):
    id: str
    user_id: str
    media_id: str
    parent_id: Optional[str] = None
    content: str
    contains_spoilers: bool
    created_at: datetime
    updated_at: datetime
    user: Optional[ProfileResponse] = None
    replies: List["CommentResponse"] = []
    reply_count: int = 0

    class Config:
        from_attributes = True

CommentResponse.model_rebuild()
