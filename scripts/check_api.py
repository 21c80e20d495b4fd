"""Quick check that the API loads and the health endpoint works."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient
from app.api.main import app

# Entering the client runs startup, which requires OMDB_API_KEY
with TestClient(app) as client:
    r = client.get("/api/health")
    print("Health status:", r.status_code)
    print("Response:", r.json())

    r = client.get("/movies/favorites/list")
    print("Favorites status:", r.status_code)
    print("Response:", r.json())
