from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from cinecircle.core.enums import MediaType, WatchlistStatus, Priority

class WatchlistItemCreate(BaseModel):
    """Add a title to the caller's watchlist"""
    tmdb_id: int = Field(..., gt=0, description="TMDB movie/show ID")
    title: str = Field(..., min_length=1)
    media_type: MediaType
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    status: WatchlistStatus = WatchlistStatus.WANT_TO_WATCH.value
    rating: Optional[int] = Field(None, ge=1, le=5)
    watched_date: Optional[str] = None
    tags: List[str] = []
    priority: Optional[Priority] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True

class WatchlistItemUpdate(BaseModel):
    """Patch a watchlist item; only fields present in the body are written"""
    status: Optional[WatchlistStatus] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    watched_date: Optional[str] = None
    tags: Optional[List[str]] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True

class WatchlistItemResponse(BaseModel):
    id: str
    user_id: str
    tmdb_id: int
    media_type: str
    title: str
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    status: str
    rating: Optional[int] = None
    watched_date: Optional[str] = None
    tags: List[str] = []
    priority: Optional[str] = None
    notes: Optional[str] = None
    added_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
