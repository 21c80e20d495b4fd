"""
Upstream movie search providers.
"""

from app.core.search.omdb_client import OmdbSearchProvider, SearchProvider

__all__ = ["OmdbSearchProvider", "SearchProvider"]
