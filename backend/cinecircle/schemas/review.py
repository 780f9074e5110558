from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse

class ReviewCreate(BaseModel):
    media_id: str = Field(..., min_length=1, description="Watchlist media id, e.g. '550-movie'")
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = None
    contains_spoilers: bool = False

class ReviewUpdate(BaseModel):
    rating: Optional[int] = Field(None, ge=1, le=5)
    title: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = None
    contains_spoilers: Optional[bool] = None

class ReviewResponse(BaseModel):
    id: str
    user_id: str
    media_id: str
    rating: int
    title: Optional[str] = None
    content: Optional[str] = None
    contains_spoilers: bool
    likes_count: int
    created_at: datetime
    updated_at: datetime
    user: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True

class LikeToggleResponse(BaseModel):
    liked: bool
    likes_count: int
