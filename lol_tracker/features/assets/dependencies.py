"""Dependencies for the assets feature."""

from typing import Annotated

from fastapi import Depends, Request

from .resolver import AssetVersionResolver


def get_asset_resolver(request: Request) -> AssetVersionResolver:
    """Shared asset resolver created in the application lifespan.

    One resolver per process keeps the patch version and augment table
    requests coalesced across every page that needs them.
    """
    return request.app.state.asset_resolver


AssetResolverDep = Annotated[AssetVersionResolver, Depends(get_asset_resolver)]

__all__ = ["get_asset_resolver", "AssetResolverDep"]
