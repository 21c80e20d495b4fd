"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import (
    FavoriteMovie,
    SearchMovie,
    SearchData,
    SearchResponse,
    FavoritesData,
    FavoritesResponse,
    MessageData,
    MessageResponse,
)

__all__ = [
    "FavoriteMovie",
    "SearchMovie",
    "SearchData",
    "SearchResponse",
    "FavoritesData",
    "FavoritesResponse",
    "MessageData",
    "MessageResponse",
]
