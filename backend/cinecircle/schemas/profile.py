from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from cinecircle.core.enums import GenreHelper

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"

class ProfileBase(BaseModel):
    username: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    favorite_genres: List[int] = []

class ProfileResponse(ProfileBase):
    user_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class ProfileUpsert(BaseModel):
    """Partial update of the caller's profile; omitted fields are left alone"""
    username: Optional[str] = Field(None, min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    display_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = None
    favorite_genres: Optional[List[int]] = None

    @field_validator("favorite_genres")
    @classmethod
    def _known_genres(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value is None:
            return value
        unknown = [genre_id for genre_id in value if not GenreHelper.is_known_genre(genre_id)]
        if unknown:
            raise ValueError(f"Unknown genre ids: {unknown}")
        # keep order, drop duplicates
        return list(dict.fromkeys(value))

class AutoCreateProfileResponse(BaseModel):
    message: str
    profile: ProfileResponse

class ProfileStats(BaseModel):
    total_items: int = 0
    watched_count: int = 0
    want_to_watch_count: int = 0
    currently_watching_count: int = 0
    dropped_count: int = 0
    reviews_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    lists_count: int = 0
    average_rating: Optional[float] = None
