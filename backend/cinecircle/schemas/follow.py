from pydantic import BaseModel, Field
from datetime import datetime

class FollowCreate(BaseModel):
    following_id: str = Field(..., min_length=1)

class FollowResponse(BaseModel):
    follower_id: str
    following_id: str
    created_at: datetime

    class Config:
        from_attributes = True

class FollowCheckResponse(BaseModel):
    is_following: bool
