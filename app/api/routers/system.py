"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from app.api.config import is_omdb_configured
from app.api.dependencies import get_favorites_store
from app.core.favorites import FavoritesStore

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(store: FavoritesStore = Depends(get_favorites_store)):
    """Health check: favorites file readable and provider configured."""
    return {
        "status": "healthy",
        "favorites": store.count(),
        "favorites_path": str(store.path),
        "provider_configured": is_omdb_configured(),
    }
