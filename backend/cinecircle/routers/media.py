from fastapi import APIRouter, Depends, Query, Request
from cinecircle.core.exceptions import handle_exception
from cinecircle.schemas.media import MediaDetailResponse, MediaSearchResponse
from cinecircle.services.media_service import MediaService

router = APIRouter(tags=["media"])

def get_media_service(request: Request) -> MediaService:
    return request.app.state.media_service

@router.get("/search", response_model=MediaSearchResponse)
def search_media(
    q: str = Query("", description="Title to search for"),
    page: int = Query(1, ge=1, le=500),
    media_service: MediaService = Depends(get_media_service)
):
    """Search movies and TV shows on TMDB"""
    try:
        return media_service.search(q, page)
    except Exception as e:
        raise handle_exception(e)

@router.get("/media/{media_id}", response_model=MediaDetailResponse)
def get_media(
    media_id: str,
    media_service: MediaService = Depends(get_media_service)
):
    """Details and trailer for a "{tmdb_id}-{media_type}" id"""
    try:
        return media_service.get_media(media_id)
    except Exception as e:
        raise handle_exception(e)
