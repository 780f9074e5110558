from pydantic import BaseModel
from typing import Optional, List, Dict, Any

class MediaSearchResponse(BaseModel):
    """Movie and TV search results merged into one page"""
    results: List[Dict[str, Any]]
    page: int
    total_pages: int
    total_results: int
    query: Optional[str] = None

class Trailer(BaseModel):
    key: str
    site: Optional[str] = None
    type: Optional[str] = None

class MediaDetailResponse(BaseModel):
    tmdb_id: int
    title: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    media_type: str
    trailer: Optional[Trailer] = None
