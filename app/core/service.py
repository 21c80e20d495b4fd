"""
Movie service: search with favorite annotation and favorites management.

Produces the payloads returned under ``data`` by the HTTP API.
"""

import logging
from typing import Any, Dict, Optional, Union

from app.core.errors import ValidationError
from app.core.favorites import FavoritesAnnotator, FavoritesStore
from app.core.pagination import DEFAULT_PAGE_SIZE, parse_page, upstream_page
from app.core.search import SearchProvider

logger = logging.getLogger(__name__)


class MovieService:
    """
    Orchestrates the search provider and the favorites store.

    Usage:
        service = MovieService(provider, FavoritesStore(path))
        service.search("matrix", page=1)
        service.add_favorite({...})
    """

    def __init__(self, provider: SearchProvider, store: FavoritesStore):
        self.provider = provider
        self.store = store
        self.annotator = FavoritesAnnotator(store)

    def search(self, query: Optional[str], page: Union[str, int, None] = 1) -> Dict[str, Any]:
        """
        Search the provider and mark results that are already favorites.

        Args:
            query: Title to search for; surrounding whitespace is ignored
            page: Upstream page number (>= 1)

        Returns:
            Dict with movies, count, totalResults, currentPage, totalPages

        Raises:
            ValidationError: Blank query or invalid page
            InternalError: Provider failure
        """
        title = query.strip() if isinstance(query, str) else ""
        if not title:
            raise ValidationError("Search query is required")
        page_number = parse_page(page)

        result = self.provider.search(title, page_number)
        movies = self.annotator.annotate(result.movies)
        window = upstream_page(movies, result.total_results, page_number)

        return {
            "movies": [m.model_dump(by_alias=True) for m in movies],
            "count": window.count,
            "totalResults": result.total_results,
            "currentPage": window.current_page,
            "totalPages": window.total_pages,
        }

    def add_favorite(self, payload: Any) -> Dict[str, str]:
        if payload is None:
            raise ValidationError("Movie payload is required")
        self.store.add(payload)
        return {"message": "Movie added to favorites"}

    def remove_favorite(self, imdb_id: Optional[str]) -> Dict[str, str]:
        self.store.remove(imdb_id or "")
        return {"message": "Movie removed from favorites"}

    def list_favorites(
        self,
        page: Union[str, int, None] = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """
        One page of favorites.

        An empty favorites list is returned as an empty page, not an error.

        Raises:
            ValidationError: Invalid page
        """
        window = self.store.list(parse_page(page), page_size)
        return {
            "favorites": [m.to_json() for m in window.items],
            "count": window.count,
            "totalResults": str(window.total_items),
            "currentPage": window.current_page,
            "totalPages": window.total_pages,
        }
