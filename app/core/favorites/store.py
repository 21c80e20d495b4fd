"""
File-backed favorites repository.

The JSON file is the source of truth. Every public operation re-reads it
on entry and mutations write the whole collection back before returning,
so nothing is cached between calls.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, List, Set, Union

from app.core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from app.core.identity import normalize_imdb_id
from app.core.models import Movie, parse_movie, parse_movie_list
from app.core.pagination import DEFAULT_PAGE_SIZE, Page, paginate

logger = logging.getLogger(__name__)


class FavoritesStore:
    """
    Durable, deduplicated collection of favorite movies.

    Identity is the IMDb id compared case-insensitively. Insertion order is
    preserved.

    Usage:
        store = FavoritesStore("data/favorites.json")
        store.add({"title": "Heat", "imdbID": "tt0113277", "year": 1995, "poster": "https://..."})
        page = store.list(page=1)
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store.

        Args:
            path: Location of the favorites JSON file. The file and its
                parent directory are created on first save.
        """
        self.path = Path(path)

    def load(self) -> List[Movie]:
        """
        Read the favorites file.

        A missing file is an empty collection. An unreadable or malformed
        file is logged and also treated as empty; records are never
        partially salvaged.

        Returns:
            Favorites in stored order
        """
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Could not read favorites file %s, starting fresh: %s", self.path, e)
            return []

        movies = parse_movie_list(data)
        if movies is None:
            logger.warning("Invalid favorites file format in %s, starting fresh", self.path)
            return []
        return movies

    def save(self, movies: List[Movie]) -> None:
        """
        Overwrite the favorites file with the full collection.

        The new content is written to a temporary file next to the target
        and moved into place, so a failed write leaves the old file intact.

        Raises:
            InternalError: If the collection cannot be written
        """
        payload = json.dumps([m.to_json() for m in movies], indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Failed to save favorites to %s: %s", self.path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise InternalError("Failed to persist favorites") from e

    def _file_mode(self) -> int:
        """Mode for the saved file: the existing file's, else the umask default."""
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def add(self, movie: Union[Movie, Any]) -> Movie:
        """
        Add a movie to favorites.

        Args:
            movie: Movie or mapping with title, imdbID, year and poster

        Returns:
            The stored Movie

        Raises:
            ValidationError: If the movie is malformed
            ConflictError: If a favorite with the same IMDb id exists
            InternalError: If the collection cannot be persisted
        """
        movie = parse_movie(movie)
        movies = self.load()

        key = normalize_imdb_id(movie.imdb_id)
        if any(normalize_imdb_id(m.imdb_id) == key for m in movies):
            raise ConflictError("Movie already in favorites")

        movies.append(movie)
        self.save(movies)
        logger.info("Added %s (%s) to favorites", movie.imdb_id, movie.title)
        return movie

    def remove(self, imdb_id: str) -> Movie:
        """
        Remove a movie from favorites by IMDb id (any case).

        Returns:
            The removed Movie

        Raises:
            ValidationError: If imdb_id is blank
            NotFoundError: If no favorite has that id
            InternalError: If the collection cannot be persisted
        """
        if not isinstance(imdb_id, str) or not imdb_id.strip():
            raise ValidationError("IMDb ID is required")

        movies = self.load()
        key = normalize_imdb_id(imdb_id)
        for index, m in enumerate(movies):
            if normalize_imdb_id(m.imdb_id) == key:
                break
        else:
            raise NotFoundError("Movie not found in favorites")

        removed = movies.pop(index)
        self.save(movies)
        logger.info("Removed %s from favorites", removed.imdb_id)
        return removed

    def list(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
        """One page of favorites in stored order. Empty is a valid result."""
        return paginate(self.load(), page, page_size)

    def favorite_ids(self) -> Set[str]:
        """Normalized IMDb ids of all current favorites."""
        return {normalize_imdb_id(m.imdb_id) for m in self.load()}

    def contains(self, imdb_id: str) -> bool:
        """Whether imdb_id (any case) is currently a favorite."""
        return normalize_imdb_id(imdb_id) in self.favorite_ids()

    def count(self) -> int:
        return len(self.load())
