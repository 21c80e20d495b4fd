"""
Movie search and favorites API endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from app.api.dependencies import get_movie_service
from app.api.models.movie import FavoritesResponse, MessageResponse, SearchResponse
from app.core.errors import (
    ConflictError,
    InternalError,
    MovieServiceError,
    NotFoundError,
    ValidationError,
)
from app.core.service import MovieService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

_STATUS_CODES = {
    ValidationError: 400,
    ConflictError: 400,
    NotFoundError: 404,
    InternalError: 500,
}


def _http_error(e: MovieServiceError) -> HTTPException:
    """Translate a service error into the matching HTTP error."""
    status_code = _STATUS_CODES.get(type(e), 500)
    if status_code >= 500:
        logger.error("Request failed: %s", e.message)
    return HTTPException(status_code=status_code, detail=e.message)


@router.get("/search", response_model=SearchResponse)
def search_movies(
    q: str | None = Query(None),
    page: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by title; each result says whether it is a favorite."""
    try:
        data = service.search(q, page)
    except MovieServiceError as e:
        raise _http_error(e)
    return {"data": data}


@router.post("/favorites", response_model=MessageResponse, status_code=201)
def add_to_favorites(
    movie: Any = Body(None),
    service: MovieService = Depends(get_movie_service),
):
    """Add a movie to favorites."""
    try:
        data = service.add_favorite(movie)
    except MovieServiceError as e:
        raise _http_error(e)
    return {"data": data}


@router.delete("/favorites/{imdb_id}", response_model=MessageResponse)
def remove_from_favorites(
    imdb_id: str,
    service: MovieService = Depends(get_movie_service),
):
    """Remove a movie from favorites (IMDb id matched case-insensitively)."""
    try:
        data = service.remove_favorite(imdb_id)
    except MovieServiceError as e:
        raise _http_error(e)
    return {"data": data}


@router.get("/favorites/list", response_model=FavoritesResponse)
def list_favorites(
    page: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """List favorites with pagination. No favorites is an empty page."""
    try:
        data = service.list_favorites(page)
    except MovieServiceError as e:
        raise _http_error(e)
    return {"data": data}
