import logging
from typing import Dict, Optional
import requests
from .interfaces import TMDBClientInterface, TMDBConfig, TMDBError, TMDBResponse

logger = logging.getLogger(__name__)

class TMDBClient(TMDBClientInterface):
    """Blocking TMDB client over a shared requests session"""

    def __init__(self, config: TMDBConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"accept": "application/json"})

    def _url(self, endpoint: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def make_request(self, endpoint: str, params: Optional[Dict] = None) -> TMDBResponse:
        """GET an endpoint with the API key and language attached"""
        url = self._url(endpoint)
        query = {**(params or {}), "api_key": self.config.api_key}
        if self.config.language:
            query["language"] = self.config.language

        logger.info(f"TMDB GET {endpoint}")
        try:
            response = self.session.get(url, params=query, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"TMDB unreachable for {endpoint}: {str(e)}")
            raise TMDBError(f"Request failed: {str(e)}")

        if response.status_code != 200:
            logger.error(f"TMDB {endpoint} answered {response.status_code}: {response.text}")
            return TMDBResponse({}, response.status_code, False)

        try:
            return TMDBResponse(response.json(), response.status_code, True)
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}: {str(e)}")
            raise TMDBError("Invalid response from metadata provider", response.status_code)
