"""
FastAPI dependency injection for the favorites store, search provider
and movie service.
"""

import logging

from fastapi import Depends

from app.api.config import (
    get_favorites_path,
    get_omdb_api_key,
    get_omdb_base_url,
    get_omdb_timeout,
)
from app.core.favorites import FavoritesStore
from app.core.search import OmdbSearchProvider, SearchProvider
from app.core.service import MovieService

logger = logging.getLogger(__name__)


def get_favorites_store() -> FavoritesStore:
    """Favorites store for the configured path. Holds no state between requests."""
    return FavoritesStore(get_favorites_path())


# Singleton search provider (shares one HTTP session)
_search_provider: OmdbSearchProvider | None = None


def get_search_provider() -> SearchProvider:
    """Get or create singleton OmdbSearchProvider."""
    global _search_provider
    if _search_provider is None:
        _search_provider = OmdbSearchProvider(
            api_key=get_omdb_api_key(),
            base_url=get_omdb_base_url(),
            timeout=get_omdb_timeout(),
        )
        logger.info("OMDb search provider initialized (%s)", _search_provider.base_url)
    return _search_provider


def close_search_provider() -> None:
    """Close the singleton provider's HTTP session, if any."""
    global _search_provider
    if _search_provider is not None:
        _search_provider.close()
        _search_provider = None


def get_movie_service(
    provider: SearchProvider = Depends(get_search_provider),
    store: FavoritesStore = Depends(get_favorites_store),
) -> MovieService:
    """Movie service wired to the provider and store."""
    return MovieService(provider, store)
