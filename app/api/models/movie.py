"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteMovie(BaseModel):
    """A favorite movie as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    imdb_id: str = Field(..., alias="imdbID")
    year: int
    poster: str


class SearchMovie(FavoriteMovie):
    """A search hit with its favorite status."""

    is_favorite: bool = Field(..., alias="isFavorite")


class SearchData(BaseModel):
    """One page of search results."""

    model_config = ConfigDict(populate_by_name=True)

    movies: list[SearchMovie]
    count: int
    total_results: str = Field(..., alias="totalResults")
    current_page: int = Field(1, alias="currentPage")
    total_pages: int = Field(0, alias="totalPages")


class SearchResponse(BaseModel):
    """Response envelope for GET /movies/search."""

    data: SearchData


class FavoritesData(BaseModel):
    """One page of favorites."""

    model_config = ConfigDict(populate_by_name=True)

    favorites: list[FavoriteMovie]
    count: int
    total_results: str = Field(..., alias="totalResults")
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")


class FavoritesResponse(BaseModel):
    """Response envelope for GET /movies/favorites/list."""

    data: FavoritesData


class MessageData(BaseModel):
    message: str


class MessageResponse(BaseModel):
    """Response envelope for favorites mutations."""

    data: MessageData
