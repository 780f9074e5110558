from typing import Any, Dict
from ..enums import MediaType
from ..interfaces import CatalogServiceInterface, TMDBClientInterface, TMDBResponse

class TVService(CatalogServiceInterface):
    """TV lookups; shows carry `name` where movies carry `title`"""
    media_type = MediaType.TV.value
    label = "TV show"

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    @staticmethod
    def with_title(show: Dict[str, Any]) -> Dict[str, Any]:
        return {**show, "title": show.get("title") or show.get("name")}

    def search(self, query: str, page: int = 1) -> TMDBResponse:
        response = self.client.make_request("search/tv", {"query": query, "page": page})
        if not response.success:
            return response
        data = {**response.data, "results": [self.with_title(show) for show in response.results]}
        return TMDBResponse(data, response.status_code, True)

    def get_details(self, tmdb_id: int) -> TMDBResponse:
        response = self.client.make_request(f"tv/{tmdb_id}")
        if not response.success:
            return response
        return TMDBResponse(self.with_title(response.data), response.status_code, True)

    def get_videos(self, tmdb_id: int) -> TMDBResponse:
        return self.client.make_request(f"tv/{tmdb_id}/videos")
