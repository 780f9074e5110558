from ..enums import MediaType
from ..interfaces import CatalogServiceInterface, TMDBClientInterface, TMDBResponse

class MovieService(CatalogServiceInterface):
    media_type = MediaType.MOVIE.value
    label = "Movie"

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    def search(self, query: str, page: int = 1) -> TMDBResponse:
        return self.client.make_request("search/movie", {"query": query, "page": page})

    def get_details(self, tmdb_id: int) -> TMDBResponse:
        return self.client.make_request(f"movie/{tmdb_id}")

    def get_videos(self, tmdb_id: int) -> TMDBResponse:
        """Trailers, teasers and clips"""
        return self.client.make_request(f"movie/{tmdb_id}/videos")
