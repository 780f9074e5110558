from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

@dataclass
class TMDBConfig:
    """Connection settings for the metadata provider"""
    api_key: str
    base_url: str = "https://api.themoviedb.org/3"
    language: str = "en-US"
    timeout: int = 30

@dataclass
class TMDBResponse:
    """Decoded body of one provider call; failed calls carry an empty body"""
    data: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 200
    success: bool = True

    @property
    def results(self) -> List[Dict[str, Any]]:
        return self.data.get("results", [])

class TMDBError(Exception):
    """The provider could not be reached or sent something unreadable"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class TMDBClientInterface(ABC):

    @abstractmethod
    def make_request(self, endpoint: str, params: Optional[Dict] = None) -> TMDBResponse:
        """GET one endpoint; non-200 answers come back with success=False"""

class CatalogServiceInterface(ABC):
    """Lookups for one kind of title (movies or TV shows)"""

    media_type: str
    label: str

    @abstractmethod
    def search(self, query: str, page: int = 1) -> TMDBResponse:
        pass

    @abstractmethod
    def get_details(self, tmdb_id: int) -> TMDBResponse:
        pass

    @abstractmethod
    def get_videos(self, tmdb_id: int) -> TMDBResponse:
        pass
