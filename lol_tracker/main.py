"""Main FastAPI application for the match-history viewer."""

import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lol_tracker import __version__
from lol_tracker.core import get_global_settings
from lol_tracker.core.backend_api import BackendAPIClient, BackendAPIError
from lol_tracker.core.logging import bind_log_context, clear_log_context, setup_logging
from lol_tracker.features.assets import AssetVersionResolver
from lol_tracker.features.favorites.router import router as favorites_router
from lol_tracker.features.matches.router import router as matches_router
from lol_tracker.features.players.router import router as players_router

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up match-history viewer", backend_base_url=settings.backend_base_url
    )
    app.state.backend_client = BackendAPIClient()
    app.state.asset_resolver = AssetVersionResolver()
    yield
    logger.info("Shutting down match-history viewer")
    await app.state.asset_resolver.close()
    await app.state.backend_client.close()


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Player page: account, match history, stats and rank badges.",
    },
    {
        "name": "matches",
        "description": "Full scoreboard for a single match.",
    },
    {
        "name": "favorites",
        "description": "Saved favorite players.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

app = FastAPI(
    title="League of Legends Match History Viewer",
    description="""
    View-layer API over the match-history backend.

    * **Player page**: account, recent matches, aggregated stats, top champions and rank badges
    * **Match detail**: per-team scoreboards, Arena placement groups
    * **Favorites**: saved players for the home page

    Icon URLs are resolved against the current Data Dragon patch.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_context_middleware(request: Request, call_next):
    """Tag every log line emitted while serving a request."""
    clear_log_context()
    bind_log_context(
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
        path=request.url.path,
    )
    try:
        return await call_next(request)
    finally:
        clear_log_context()


@app.exception_handler(BackendAPIError)
async def backend_api_error_handler(
    request: Request, exc: BackendAPIError
) -> JSONResponse:
    """Answer with the backend's status and message."""
    status_code = exc.status_code or 502
    logger.warning(
        "Backend request failed", status_code=exc.status_code, error=exc.message
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.include_router(players_router, prefix="/api/v1")
app.include_router(matches_router, prefix="/api/v1")
app.include_router(favorites_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
    }
