import logging
from typing import Optional, Tuple
from .config import Settings, get_settings
from .interfaces import CatalogServiceInterface, TMDBClientInterface, TMDBConfig
from .tmdb_client import TMDBClient
from .services import MovieService, TVService

logger = logging.getLogger(__name__)

class TMDBServiceFactory:
    """Builds the TMDB client and catalog services from settings"""

    @staticmethod
    def create_client(settings: Optional[Settings] = None) -> TMDBClientInterface:
        settings = settings or get_settings()
        if not settings.TMDB_API_KEY:
            logger.warning("TMDB_API_KEY is not set, metadata requests will be rejected upstream")
        config = TMDBConfig(
            api_key=settings.TMDB_API_KEY,
            base_url=settings.TMDB_BASE_URL,
            language=settings.TMDB_LANGUAGE,
            timeout=settings.TMDB_TIMEOUT,
        )
        return TMDBClient(config)

    @staticmethod
    def create_catalogs(client: TMDBClientInterface) -> Tuple[CatalogServiceInterface, CatalogServiceInterface]:
        """Movie and TV catalogs sharing one client, movies first"""
        return MovieService(client), TVService(client)
