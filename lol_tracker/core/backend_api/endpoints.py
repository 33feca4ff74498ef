"""Backend API endpoint definitions."""

from typing import Any, Dict
from urllib.parse import quote

from lol_tracker.core.enums import Region


class BackendAPIEndpoints:
    """Paths and query parameters for every backend API call.

    Paths are relative to the client's base URL; httpx encodes query values.
    """

    # Account endpoints
    @staticmethod
    def account(game_name: str, tag: str, region: Region) -> tuple[str, Dict[str, Any]]:
        """Resolve account by Riot ID."""
        return "/api/summoner", {
            "gameName": game_name,
            "tag": tag,
            "region": region.value,
        }

    # Match endpoints
    @staticmethod
    def match_summaries(
        puuid: str, region: Region, count: int
    ) -> tuple[str, Dict[str, Any]]:
        """Recent match summaries for a player."""
        return "/api/matches/summary", {
            "puuid": puuid,
            "region": region.value,
            "count": count,
        }

    @staticmethod
    def match_detail(match_id: str, region: Region) -> tuple[str, Dict[str, Any]]:
        """Full scoreboard for one match."""
        return "/api/matches/full-detail", {
            "matchId": match_id,
            "region": region.value,
        }

    # Stats / ranked endpoints
    @staticmethod
    def player_stats(puuid: str, region: Region, count: int) -> tuple[str, Dict[str, Any]]:
        """Server-computed aggregate stats."""
        return "/api/stats", {"puuid": puuid, "region": region.value, "count": count}

    @staticmethod
    def ranked_entries(puuid: str, region: Region) -> tuple[str, Dict[str, Any]]:
        """Ranked queue standings."""
        return "/api/ranked", {"puuid": puuid, "region": region.value}

    # Favorites endpoints
    @staticmethod
    def favorites() -> str:
        """Favorites collection (GET list, POST add)."""
        return "/api/favorites"

    @staticmethod
    def favorite(puuid: str) -> str:
        """Single favorite by PUUID (DELETE)."""
        return f"/api/favorites/{quote(puuid, safe='')}"

    @staticmethod
    def favorite_check(puuid: str) -> str:
        """Favorite flag for a PUUID."""
        return f"/api/favorites/check/{quote(puuid, safe='')}"
