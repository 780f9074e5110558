from .movie_service import MovieService
from .tv_service import TVService

__all__ = ["MovieService", "TVService"]
