import logging
from typing import Any, Dict, List, Optional, Tuple
from cinecircle.core.exceptions import NotFoundException, UpstreamFailureException, ValidationException
from cinecircle.core.interfaces import CatalogServiceInterface, TMDBError, TMDBResponse
from cinecircle.schemas.media import MediaDetailResponse, MediaSearchResponse, Trailer

logger = logging.getLogger(__name__)

class MediaService:
    """Search and detail lookups proxied to TMDB"""

    def __init__(self, movie_service: CatalogServiceInterface, tv_service: CatalogServiceInterface):
        # search merges results in this order
        self.catalogs: Dict[str, CatalogServiceInterface] = {
            movie_service.media_type: movie_service,
            tv_service.media_type: tv_service,
        }

    def parse_media_id(self, media_id: str) -> Tuple[int, str]:
        """Split "550-movie" into (550, "movie")"""
        tmdb_part, _, media_type = media_id.partition("-")
        if not tmdb_part.isdigit() or media_type not in self.catalogs:
            raise ValidationException(f"Invalid media id: {media_id}")
        return int(tmdb_part), media_type

    @staticmethod
    def _checked(response: TMDBResponse, what: str) -> Dict[str, Any]:
        if response.success:
            return response.data
        if response.status_code == 404:
            raise NotFoundException(f"{what} not found")
        raise UpstreamFailureException(f"Failed to fetch {what}")

    @staticmethod
    def select_trailer(videos: List[Dict[str, Any]]) -> Optional[Trailer]:
        """First YouTube trailer, else the first trailer of any site"""
        trailers = [v for v in videos if v.get("type") == "Trailer" and v.get("key")]
        if not trailers:
            return None
        video = next((v for v in trailers if v.get("site") == "YouTube"), trailers[0])
        return Trailer(key=video["key"], site=video.get("site"), type=video.get("type"))

    def search(self, query: str, page: int = 1) -> MediaSearchResponse:
        """Search movies and TV shows for the same page, movies first"""
        query = (query or "").strip()
        if not query:
            raise ValidationException("Search query is required")

        pages = []
        try:
            for media_type, catalog in self.catalogs.items():
                pages.append((media_type, self._checked(catalog.search(query, page), f"{catalog.label} search")))
        except TMDBError as e:
            logger.error(f"TMDB search failed for '{query}': {e.message}")
            raise UpstreamFailureException("Metadata provider unavailable")

        results = []
        for media_type, data in pages:
            results.extend({**item, "media_type": media_type} for item in data.get("results", []))

        return MediaSearchResponse(
            results=results,
            page=page,
            total_pages=max((data.get("total_pages", 0) for _, data in pages), default=0),
            total_results=sum(data.get("total_results", 0) for _, data in pages),
            query=query
        )

    def _fetch_trailer(self, catalog: CatalogServiceInterface, tmdb_id: int) -> Optional[Trailer]:
        try:
            response = catalog.get_videos(tmdb_id)
        except TMDBError as e:
            logger.warning(f"Videos unavailable for {tmdb_id}-{catalog.media_type}: {e.message}")
            return None
        if not response.success:
            logger.warning(f"Videos unavailable for {tmdb_id}-{catalog.media_type}: status {response.status_code}")
            return None
        return self.select_trailer(response.results)

    def get_media(self, media_id: str) -> MediaDetailResponse:
        """Details for one title with its trailer, if any"""
        tmdb_id, media_type = self.parse_media_id(media_id)
        catalog = self.catalogs[media_type]

        try:
            details = self._checked(catalog.get_details(tmdb_id), catalog.label)
        except TMDBError as e:
            logger.error(f"TMDB details failed for {media_id}: {e.message}")
            raise UpstreamFailureException("Metadata provider unavailable")

        return MediaDetailResponse(
            tmdb_id=tmdb_id,
            title=details.get("title"),
            overview=details.get("overview"),
            poster_path=details.get("poster_path"),
            release_date=details.get("release_date"),
            first_air_date=details.get("first_air_date"),
            media_type=media_type,
            trailer=self._fetch_trailer(catalog, tmdb_id)
        )
