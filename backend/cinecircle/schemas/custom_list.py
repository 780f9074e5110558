from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from cinecircle.schemas.profile import ProfileResponse
from cinecircle.schemas.watchlist import WatchlistItemResponse

class CustomListCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    is_public: bool = True
    cover_image_url: Optional[str] = None

class CustomListUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    is_public: Optional[bool] = None
    cover_image_url: Optional[str] = None

class CustomListResponse(BaseModel):
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    is_public: bool
    cover_image_url: Optional[str] = None
    items_count: int
    created_at: datetime
    updated_at: datetime
    user: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True

class CustomListItemCreate(BaseModel):
    media_id: str = Field(..., min_length=1)

class CustomListItemResponse(BaseModel):
    list_id: str
    media_id: str
    added_at: datetime
    media: Optional[WatchlistItemResponse] = None

    class Config:
        from_attributes = True

class CustomListDetailResponse(CustomListResponse):
    items: List[CustomListItemResponse] = []
