"""
FastAPI application entry point for the Movie Favorites API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.config import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_log_file,
    get_log_level,
    get_omdb_api_key,
)
from app.api.dependencies import close_search_provider
from app.api.routers import movies, system
from app.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(log_file=get_log_file(), level=get_log_level())
    # Fail startup, not individual requests, when the key is missing
    get_omdb_api_key()
    logger.info("Movie Favorites API started")
    yield
    close_search_provider()


app = FastAPI(
    title="Movie Favorites API",
    description="Search movies via OMDb and keep a list of favorites",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 like the service's own validation errors."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Favorites API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
