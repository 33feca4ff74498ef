"""Dependencies for the matches feature."""

from typing import Annotated

from fastapi import Depends

from lol_tracker.core.dependencies import BackendClientDep
from lol_tracker.features.assets.dependencies import AssetResolverDep
from .service import MatchDetailLoader


async def get_match_detail_loader(
    client: BackendClientDep, assets: AssetResolverDep
) -> MatchDetailLoader:
    """Get match detail loader instance."""
    return MatchDetailLoader(client, assets)


MatchDetailLoaderDep = Annotated[MatchDetailLoader, Depends(get_match_detail_loader)]

__all__ = ["get_match_detail_loader", "MatchDetailLoaderDep"]
