"""
OMDb search provider.

Wraps the OMDb title search endpoint behind the SearchProvider protocol.
Transport failures are reported as InternalError; "no matches" answers
from OMDb are an empty result, not an error.
"""

import logging
from typing import Optional, Protocol

import pydantic
import requests

from app.core.errors import InternalError
from app.core.models import MovieSummary, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://www.omdbapi.com/"
DEFAULT_TIMEOUT = 10.0


class SearchProvider(Protocol):
    """Anything that can search movies by title, one page at a time."""

    def search(self, title: str, page: int = 1) -> SearchResult:
        ...


class OmdbSearchProvider:
    """Search provider backed by the OMDb API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            api_key: OMDb API key
            base_url: OMDb endpoint
            timeout: Seconds to wait for OMDb before giving up
            session: Optional requests session (one is created if omitted)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, title: str, page: int = 1) -> SearchResult:
        """
        Search OMDb by title.

        Raises:
            InternalError: On network errors, HTTP errors or an undecodable body
        """
        params = {"apikey": self.api_key, "s": title, "page": page}
        try:
            r = self.session.get(self.base_url, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to search movies for %r (page %d): %s", title, page, e)
            raise InternalError("Failed to search movies") from e

        if not isinstance(data, dict):
            logger.error("Unexpected OMDb response for %r: %r", title, data)
            raise InternalError("Failed to search movies")

        if data.get("Response") == "False" or data.get("Error"):
            logger.info("No OMDb results for %r (page %d): %s", title, page, data.get("Error"))
            return SearchResult.empty()

        try:
            movies = [MovieSummary.model_validate(m) for m in data.get("Search") or []]
        except pydantic.ValidationError as e:
            logger.error("Malformed OMDb search results for %r: %s", title, e)
            raise InternalError("Failed to search movies") from e

        return SearchResult(movies=movies, total_results=str(data.get("totalResults") or "0"))

    def close(self) -> None:
        self.session.close()
