"""Core dependencies for FastAPI application."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from .backend_api import BackendAPIClient
from .enums import Region


def get_backend_client(request: Request) -> BackendAPIClient:
    """Shared backend client created in the application lifespan."""
    return request.app.state.backend_client


def get_region(region: str) -> Region:
    """Region path parameter, rejected with 400 if unsupported."""
    try:
        return Region.parse(region)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# Type aliases for cleaner dependency injection
BackendClientDep = Annotated[BackendAPIClient, Depends(get_backend_client)]
RegionDep = Annotated[Region, Depends(get_region)]

__all__ = ["get_backend_client", "get_region", "BackendClientDep", "RegionDep"]
