"""Result types returned by the favorites service."""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from lol_tracker.core.backend_api.models import FavoritePlayerDTO
from lol_tracker.core.exceptions import FavoriteServiceError


class FavoriteResult(BaseModel):
    """Outcome of a favorites call; ``favorites`` is None when the list is unknown."""

    ok: bool
    favorites: Optional[List[FavoritePlayerDTO]] = None
    error: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    def unwrap(self) -> List[FavoritePlayerDTO]:
        """Favorites list, raising FavoriteServiceError on failure."""
        if not self.ok:
            raise FavoriteServiceError(
                self.error or "Favorites request failed", operation="unwrap"
            )
        return self.favorites or []


class FavoriteToggleResult(FavoriteResult):
    """Outcome of flipping a player's favorite flag."""

    is_favorite: bool = Field(..., alias="isFavorite")


class FavoriteToggleRequest(BaseModel):
    """Body for the toggle endpoint; the player is identified by the route."""

    is_favorite: bool = Field(
        ..., alias="isFavorite", description="Flag as currently shown to the user"
    )

    model_config = ConfigDict(populate_by_name=True)
