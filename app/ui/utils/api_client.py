"""
Movie Favorites API client wrapper for Streamlit UI.
"""

import os
from urllib.parse import quote

import requests

from app.utils.logging_config import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """Request to the Movie Favorites API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:3001").rstrip("/")


def _handle_response(r: requests.Response) -> dict:
    """Return the decoded body, or raise ApiError with the server's message."""
    if not r.ok:
        try:
            detail = r.json().get("detail")
        except ValueError:
            detail = None
        if not isinstance(detail, str):
            detail = f"Request failed with status {r.status_code}"
        logger.warning("API error %s: %s", r.status_code, detail)
        raise ApiError(detail, status_code=r.status_code)
    return r.json()


def search_movies(query: str, page: int = 1) -> dict:
    """Search movies by title."""
    if not query.strip():
        raise ApiError("Search query is required")
    r = requests.get(
        f"{get_api_base_url()}/movies/search",
        params={"q": query, "page": page},
        timeout=15,
    )
    return _handle_response(r)["data"]


def get_favorites(page: int = 1) -> dict:
    """Get one page of favorites."""
    r = requests.get(
        f"{get_api_base_url()}/movies/favorites/list",
        params={"page": page},
        timeout=10,
    )
    return _handle_response(r)["data"]


def add_to_favorites(movie: dict) -> dict:
    """Add a movie (title, imdbID, year, poster) to favorites."""
    if not movie.get("imdbID") or not movie.get("title"):
        raise ApiError("Movie must have an imdbID and a title")
    payload = {k: movie[k] for k in ("title", "imdbID", "year", "poster") if k in movie}
    r = requests.post(
        f"{get_api_base_url()}/movies/favorites",
        json=payload,
        timeout=10,
    )
    return _handle_response(r)["data"]


def remove_from_favorites(imdb_id: str) -> dict:
    """Remove a movie from favorites."""
    if not imdb_id.strip():
        raise ApiError("IMDb ID is required")
    r = requests.delete(
        f"{get_api_base_url()}/movies/favorites/{quote(imdb_id, safe='')}",
        timeout=10,
    )
    return _handle_response(r)["data"]


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
