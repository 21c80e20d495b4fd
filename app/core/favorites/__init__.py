"""
Favorites persistence and search-result annotation.
"""

from app.core.favorites.store import FavoritesStore
from app.core.favorites.annotator import FavoritesAnnotator

__all__ = ["FavoritesStore", "FavoritesAnnotator"]
