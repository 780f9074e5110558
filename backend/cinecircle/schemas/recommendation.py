from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse
from cinecircle.schemas.watchlist import WatchlistItemResponse

class RecommendationCreate(BaseModel):
    to_user_id: str = Field(..., min_length=1)
    media_id: str = Field(..., min_length=1)
    message: Optional[str] = Field(None, max_length=500)

class RecommendationResponse(BaseModel):
    id: str
    from_user_id: str
    to_user_id: str
    media_id: str
    message: Optional[str] = None
    created_at: datetime
    from_user: Optional[ProfileResponse] = None
    media: Optional[WatchlistItemResponse] = None

    class Config:
        from_attributes = True
