"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from app.core.errors import ConfigurationError


def get_omdb_api_key() -> str:
    """Get the OMDb API key; required."""
    api_key = os.getenv("OMDB_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("OMDB_API_KEY environment variable is not set")
    return api_key


def is_omdb_configured() -> bool:
    """Whether an OMDb API key is set; never raises."""
    return bool(os.getenv("OMDB_API_KEY", "").strip())


def get_omdb_base_url() -> str:
    """Get OMDb endpoint from env or default."""
    return os.getenv("OMDB_BASE_URL", "") or "http://www.omdbapi.com/"


def get_omdb_timeout() -> float:
    """Get OMDb request timeout in seconds."""
    return float(os.getenv("OMDB_TIMEOUT", "10"))


def get_favorites_path() -> str:
    """Get favorites file path from env or default."""
    return os.getenv("FAVORITES_PATH", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "favorites.json"
    )


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins (comma separated)."""
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["http://localhost:3000"]


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name; console only when unset."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3001"))
