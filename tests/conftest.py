"""
Shared fixtures: an in-memory fake of the match-history backend and the
asset CDNs, served through ``httpx.MockTransport``.
"""

import asyncio
import json
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from lol_tracker.core.backend_api import BackendAPIClient
from lol_tracker.core.config import Settings
from lol_tracker.features.assets import AssetVersionResolver

BACKEND_URL = "http://backend.test"
PATCH_VERSION = "15.3.1"


class FakeBackend:
    """
    Minimal stand-in for the backend proxy.

    Data is keyed by puuid. ``failures`` maps a path to a ``(status, body)``
    pair returned instead of the normal response; ``gates`` maps a path to an
    ``asyncio.Event`` the handler waits on before answering.
    """

    def __init__(self) -> None:
        self.accounts: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self.matches: Dict[str, List[Dict[str, Any]]] = {}
        self.stats: Dict[str, Dict[str, Any]] = {}
        self.ranked: Dict[str, List[Dict[str, Any]]] = {}
        self.details: Dict[str, Dict[str, Any]] = {}
        self.favorites: List[Dict[str, Any]] = []
        self.failures: Dict[str, Tuple[int, Any]] = {}
        self.gates: Dict[str, asyncio.Event] = {}
        self.calls: Counter = Counter()
        self._next_favorite_id = 1

    def add_account(
        self,
        game_name: str,
        tag: str,
        puuid: str,
        region: str = "EUW",
        profile_icon_id: Optional[int] = 588,
    ) -> Dict[str, Any]:
        account = {
            "puuid": puuid,
            "gameName": game_name,
            "tagLine": tag,
            "profileIconId": profile_icon_id,
        }
        self.accounts[(game_name.lower(), tag.lower(), region)] = account
        return account

    def fail(self, path: str, status: int, body: Any = None) -> None:
        self.failures[path] = (status, body)

    def hold(self, path: str, puuid: Optional[str] = None) -> asyncio.Event:
        """Block requests to ``path`` (for one puuid, if given) until the event is set."""
        gate = asyncio.Event()
        self.gates[f"{path}:{puuid}" if puuid else path] = gate
        return gate

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        params = request.url.params
        self.calls[path] += 1

        gate = self.gates.get(path) or self.gates.get(f"{path}:{params.get('puuid')}")
        if gate is not None:
            await gate.wait()

        if path in self.failures:
            status, body = self.failures[path]
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=body or "")

        if path == "/api/summoner":
            key = (
                params.get("gameName", "").lower(),
                params.get("tag", "").lower(),
                params.get("region", ""),
            )
            account = self.accounts.get(key)
            if account is None:
                return httpx.Response(404, json={"message": "Summoner not found"})
            return httpx.Response(200, json=account)

        if path == "/api/matches/summary":
            return httpx.Response(200, json=self.matches.get(params["puuid"], []))

        if path == "/api/stats":
            stats = self.stats.get(params["puuid"])
            if stats is None:
                return httpx.Response(503, text="Stats service unavailable")
            return httpx.Response(200, json=stats)

        if path == "/api/ranked":
            return httpx.Response(200, json=self.ranked.get(params["puuid"], []))

        if path == "/api/matches/full-detail":
            detail = self.details.get(params["matchId"])
            if detail is None:
                return httpx.Response(404, json={"error": "Match not found"})
            return httpx.Response(200, json=detail)

        if path == "/api/favorites":
            if request.method == "POST":
                return self._add_favorite(json.loads(request.content))
            return httpx.Response(200, json=self.favorites)

        if path.startswith("/api/favorites/check/"):
            puuid = path.rsplit("/", 1)[-1]
            is_favorite = any(f["puuid"] == puuid for f in self.favorites)
            return httpx.Response(200, json={"isFavorite": is_favorite})

        if path.startswith("/api/favorites/") and request.method == "DELETE":
            puuid = path.rsplit("/", 1)[-1]
            before = len(self.favorites)
            self.favorites = [f for f in self.favorites if f["puuid"] != puuid]
            if len(self.favorites) == before:
                return httpx.Response(404, json={"message": "Favorite not found"})
            return httpx.Response(204)

        return httpx.Response(404, text="Not Found")

    def _add_favorite(self, body: Dict[str, Any]) -> httpx.Response:
        if any(f["puuid"] == body["puuid"] for f in self.favorites):
            return httpx.Response(400, json={"message": "Player is already a favorite"})
        favorite = {
            "id": self._next_favorite_id,
            "puuid": body["puuid"],
            "gameName": body["gameName"],
            "tagLine": body["tagLine"],
            "region": body["region"],
            "savedAt": "2026-10-01T12:00:00",
        }
        self._next_favorite_id += 1
        self.favorites.append(favorite)
        return httpx.Response(201, json=favorite)


class FakeCDN:
    """Data Dragon versions list and the Arena augment metadata."""

    def __init__(self) -> None:
        self.versions: Any = [PATCH_VERSION, "15.2.1", "15.1.1"]
        self.augments: Any = [
            {
                "id": 1,
                "name": "Blade Waltz",
                "augmentSmallIconPath": "/lol-game-data/assets/ASSETS/UX/Cherry/Augments/Icons/BladeWaltz_small.png",
            },
            {"id": 2, "name": "No Icon", "augmentSmallIconPath": ""},
        ]
        self.versions_status = 200
        self.augments_status = 200
        self.calls: Counter = Counter()
        self.gate: Optional[asyncio.Event] = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        if self.gate is not None:
            await self.gate.wait()
        if path.endswith("versions.json"):
            return httpx.Response(self.versions_status, json=self.versions)
        if path.endswith("cherry-augments.json"):
            return httpx.Response(self.augments_status, json=self.augments)
        return httpx.Response(404)

    def version_calls(self) -> int:
        return sum(n for p, n in self.calls.items() if p.endswith("versions.json"))

    def augment_calls(self) -> int:
        return sum(n for p, n in self.calls.items() if p.endswith("cherry-augments.json"))


@pytest.fixture
def settings():
    return Settings(
        backend_base_url=BACKEND_URL,
        fallback_patch_version="14.24.1",
        match_window_size=10,
    )


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def cdn():
    return FakeCDN()


@pytest.fixture
async def api_client(backend):
    client = BackendAPIClient(
        base_url=BACKEND_URL, transport=httpx.MockTransport(backend.handler)
    )
    yield client
    await client.close()


@pytest.fixture
async def assets(settings, cdn):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(cdn.handler))
    resolver = AssetVersionResolver(settings=settings, http_client=http_client)
    yield resolver
    await http_client.aclose()


@pytest.fixture
def make_match():
    """Factory for match summary payloads in the backend's camelCase shape."""

    def _make(**overrides: Any) -> Dict[str, Any]:
        match = {
            "matchId": "EUW1_1000",
            "championName": "Ahri",
            "kills": 5,
            "deaths": 2,
            "assists": 7,
            "win": True,
            "gameDurationSec": 1865,
            "gameEndTimestamp": 1_760_000_000_000,
            "championLevel": 16,
            "summoner1Id": 4,
            "summoner2Id": 14,
            "items": [3157, 0, 6655],
            "totalMinionsKilled": 180,
            "neutralMinionsKilled": 12,
            "queueId": 420,
            "teamTotalKills": 20,
            "allies": [],
            "enemies": [],
            "primaryRuneId": 8112,
            "secondaryRuneStyleId": 8200,
            "augments": [],
            "placement": 0,
        }
        match.update(overrides)
        return match

    return _make


@pytest.fixture
def make_participant():
    """Factory for match detail participant payloads."""

    def _make(puuid: str, team_id: int = 100, **overrides: Any) -> Dict[str, Any]:
        participant = {
            "puuid": puuid,
            "summonerName": f"Player {puuid}",
            "riotIdTagline": "EUW",
            "championName": "Ahri",
            "teamId": team_id,
            "kills": 3,
            "deaths": 3,
            "assists": 3,
            "championLevel": 15,
            "totalDamageDealtToChampions": 10000,
            "goldEarned": 9000,
            "items": [1055, 0],
            "totalMinionsKilled": 150,
            "neutralMinionsKilled": 0,
            "wardsPlaced": 8,
            "wardsKilled": 2,
            "visionWardsBoughtInGame": 1,
            "win": team_id == 100,
        }
        participant.update(overrides)
        return participant

    return _make
