"""
Movies Backend API - FastAPI application.

Provides endpoints for:
- Proxying the movie catalog front end to TMDb (genres, search, discover,
  movie details and categories, credits, recommendations, people, configuration)
- A self-describing index of those endpoints at /api
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import deps
from api.routers import catalog, tmdb_proxy

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    numeric_level = getattr(logging, (level or os.getenv("LOG_LEVEL") or "INFO").upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # urllib3 logs every pooled connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=http://localhost:3000,https://movies.example.com
    """
    origins_str = os.getenv("CORS_ALLOW_ORIGINS", "")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the gateway at startup so bad configuration fails fast."""
    configure_logging()
    logger.info("Starting up Movies Backend API...")
    deps.get_gateway()
    yield
    logger.info("Shutting down Movies Backend API...")
    deps.close_gateway()


app = FastAPI(
    title="Movies Backend API",
    description="Data gateway between the movies front end and TMDb",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# Set CORS_ALLOW_ORIGINS env var with comma-separated origins for production
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0  # Only allow credentials with explicit origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog.router, prefix="/api")
app.include_router(tmdb_proxy.router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "movies-backend"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
