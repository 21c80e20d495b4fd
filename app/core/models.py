"""
Domain models for favorites and upstream search results.

Field names are snake_case in Python; the aliases are the JSON keys used
on disk and on the wire (``imdbID``, ``isFavorite``, OMDb's ``Title`` ...).
"""

from typing import Any, List, Mapping, Optional
from urllib.parse import urlparse

import pydantic
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from app.core.errors import ValidationError

MIN_YEAR = 1900
MAX_YEAR = 2100


class Movie(BaseModel):
    """A favorited movie as persisted in the favorites file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1)
    imdb_id: str = Field(..., alias="imdbID", min_length=1)
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, strict=True)
    poster: str = Field(..., min_length=1)

    @field_validator("title", "imdb_id")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("poster")
    @classmethod
    def _poster_is_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an http(s) URL")
        return value

    def to_json(self) -> dict:
        """Serialize with the on-disk key names."""
        return self.model_dump(by_alias=True)


class MovieSummary(BaseModel):
    """A single search hit as reported by the provider."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", alias="Title")
    imdb_id: str = Field(..., alias="imdbID")
    year: str = Field("", alias="Year")
    type: str | None = Field(None, alias="Type")
    poster: str = Field("", alias="Poster")


class SearchResult(BaseModel):
    """One upstream page of search hits plus the provider-reported total."""

    movies: List[MovieSummary] = Field(default_factory=list)
    total_results: str = "0"

    @classmethod
    def empty(cls) -> "SearchResult":
        return cls(movies=[], total_results="0")


class AnnotatedMovie(BaseModel):
    """A search hit decorated with its favorite status."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    imdb_id: str = Field(..., alias="imdbID")
    year: int
    poster: str
    is_favorite: bool = Field(..., alias="isFavorite")


_MOVIE_LIST = TypeAdapter(List[Movie])


def _describe(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ())) or "movie"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def parse_movie(data: Any) -> Movie:
    """
    Validate arbitrary input into a Movie.

    Args:
        data: A Movie instance or a mapping with title, imdbID, year, poster

    Returns:
        Validated Movie

    Raises:
        ValidationError: If the input is missing fields or has the wrong shape
    """
    if isinstance(data, Movie):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError("Movie payload must be an object")
    try:
        return Movie.model_validate(dict(data))
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid movie: {_describe(e)}") from e


def parse_movie_list(data: Any) -> Optional[List[Movie]]:
    """Validate a decoded JSON document as a list of Movies; None if invalid."""
    try:
        return _MOVIE_LIST.validate_python(data)
    except pydantic.ValidationError:
        return None
