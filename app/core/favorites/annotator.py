"""
Marks provider search hits with their favorite status.
"""

import logging
from typing import Iterable, List

from app.core.favorites.store import FavoritesStore
from app.core.identity import normalize_imdb_id, parse_year
from app.core.models import AnnotatedMovie, MovieSummary

logger = logging.getLogger(__name__)


class FavoritesAnnotator:
    """Cross-references search results against the favorites store."""

    def __init__(self, store: FavoritesStore):
        self.store = store

    def annotate(self, summaries: Iterable[MovieSummary]) -> List[AnnotatedMovie]:
        """
        Decorate each summary with is_favorite.

        Favorites are read once per call, from disk, so the result reflects
        any change made since the previous request.
        """
        favorite_ids = self.store.favorite_ids()
        annotated = [
            AnnotatedMovie(
                title=summary.title,
                imdb_id=summary.imdb_id,
                year=parse_year(summary.year),
                poster=summary.poster,
                is_favorite=normalize_imdb_id(summary.imdb_id) in favorite_ids,
            )
            for summary in summaries
        ]
        logger.debug(
            "Annotated %d results (%d favorites)",
            len(annotated),
            sum(1 for m in annotated if m.is_favorite),
        )
        return annotated
