"""Router tests with collaborators replaced through dependency overrides."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from lol_tracker.core.backend_api import (
    AccountDTO,
    BackendAPIClient,
    FavoritePlayerDTO,
    NotFoundError,
)
from lol_tracker.core.dependencies import get_backend_client
from lol_tracker.core.enums import LoadStatus, Region
from lol_tracker.core.exceptions import PlayerLoadError
from lol_tracker.features.favorites import (
    FavoriteResult,
    FavoritesService,
    FavoriteToggleResult,
)
from lol_tracker.features.favorites.dependencies import get_favorites_service
from lol_tracker.features.matches.dependencies import get_match_detail_loader
from lol_tracker.features.matches.schemas import MatchDetailState, MatchDetailView
from lol_tracker.features.matches.service import MatchDetailLoader
from lol_tracker.features.players import PlayerDataOrchestrator, PlayerPageState
from lol_tracker.features.players.dependencies import get_player_orchestrator
from lol_tracker.main import app

FAKER = AccountDTO(puuid="puuid-faker", game_name="Faker", tag_line="KR1")


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def orchestrator():
    mock = MagicMock(spec=PlayerDataOrchestrator)
    app.dependency_overrides[get_player_orchestrator] = lambda: mock
    return mock


@pytest.fixture
def favorites():
    mock = AsyncMock(spec=FavoritesService)
    app.dependency_overrides[get_favorites_service] = lambda: mock
    return mock


@pytest.fixture
def backend_client():
    mock = AsyncMock(spec=BackendAPIClient)
    app.dependency_overrides[get_backend_client] = lambda: mock
    return mock


@pytest.fixture
def loader():
    mock = MagicMock(spec=MatchDetailLoader)
    app.dependency_overrides[get_match_detail_loader] = lambda: mock
    return mock


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestPlayerPage:
    """Test cases for GET /api/v1/players/{region}/{game_name}/{tag}."""

    def test_returns_page_state(self, client, orchestrator):
        state = PlayerPageState(
            status=LoadStatus.DONE,
            region=Region.EUW,
            account=FAKER,
            is_favorite=True,
            warnings=["Ranked unavailable: Riot API error"],
        )
        orchestrator.raise_for_error.return_value = state

        response = client.get("/api/v1/players/euw/Faker/KR1")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "done"
        assert data["account"]["gameName"] == "Faker"
        assert data["isFavorite"] is True
        assert data["warnings"] == ["Ranked unavailable: Riot API error"]
        assert "match_summaries" not in data
        orchestrator.load.assert_awaited_once_with(Region.EUW, "Faker", "KR1")

    def test_account_failure_uses_backend_status(self, client, orchestrator):
        orchestrator.raise_for_error.side_effect = PlayerLoadError(
            "Summoner not found", operation="load", context={"status_code": 404}
        )

        response = client.get("/api/v1/players/EUW/Nobody/0000")

        assert response.status_code == 404
        assert response.json()["detail"] == "Summoner not found"

    def test_transport_failure_is_bad_gateway(self, client, orchestrator):
        orchestrator.raise_for_error.side_effect = PlayerLoadError(
            "An unknown network error occurred.", context={"status_code": None}
        )

        response = client.get("/api/v1/players/EUW/Faker/KR1")

        assert response.status_code == 502

    def test_unknown_region(self, client, orchestrator):
        response = client.get("/api/v1/players/MARS/Faker/KR1")

        assert response.status_code == 400
        assert "Unsupported region" in response.json()["detail"]
        orchestrator.load.assert_not_called()


class TestToggleFavorite:
    """Test cases for POST /api/v1/players/{region}/{game_name}/{tag}/favorite."""

    def test_adds_when_not_favorite(self, client, backend_client, favorites):
        backend_client.get_account.return_value = FAKER
        favorites.toggle.return_value = FavoriteToggleResult(ok=True, is_favorite=True)

        response = client.post(
            "/api/v1/players/KR/Faker/KR1/favorite", json={"isFavorite": False}
        )

        assert response.status_code == 200
        assert response.json()["isFavorite"] is True
        favorites.toggle.assert_awaited_once_with(FAKER, Region.KR, False)

    def test_unknown_player(self, client, backend_client, favorites):
        backend_client.get_account.side_effect = NotFoundError("Summoner not found", 404)

        response = client.post(
            "/api/v1/players/KR/Nobody/0000/favorite", json={"isFavorite": False}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Summoner not found"
        favorites.toggle.assert_not_called()

    def test_backend_failure(self, client, backend_client, favorites):
        backend_client.get_account.return_value = FAKER
        favorites.toggle.return_value = FavoriteToggleResult(
            ok=False, is_favorite=True, error="Database unavailable"
        )

        response = client.post(
            "/api/v1/players/KR/Faker/KR1/favorite", json={"isFavorite": True}
        )

        assert response.status_code == 502
        assert response.json()["detail"] == "Database unavailable"

    def test_missing_body(self, client, backend_client, favorites):
        response = client.post("/api/v1/players/KR/Faker/KR1/favorite")

        assert response.status_code == 422


class TestFavoritesList:
    """Test cases for GET /api/v1/favorites."""

    def test_lists_favorites(self, client, favorites):
        favorites.list_favorites.return_value = FavoriteResult(
            ok=True,
            favorites=[
                FavoritePlayerDTO(
                    id=1, puuid="puuid-faker", game_name="Faker", tag_line="KR1", region="KR"
                )
            ],
        )

        response = client.get("/api/v1/favorites")

        assert response.status_code == 200
        assert response.json()[0]["gameName"] == "Faker"

    def test_backend_failure(self, client, favorites):
        favorites.list_favorites.return_value = FavoriteResult(
            ok=False, error="Database unavailable"
        )

        response = client.get("/api/v1/favorites")

        assert response.status_code == 502
        assert response.json()["detail"] == "Database unavailable"


class TestMatchDetail:
    """Test cases for GET /api/v1/matches/{region}/{match_id}."""

    def test_returns_scoreboard(self, client, loader):
        view = MatchDetailView(
            match_id="EUW1_1",
            queue_id=420,
            queue_name="Ranked Solo/Duo",
            duration="30m 00s",
            time_ago="2h ago",
            viewer_result="Victory",
        )
        loader.load.return_value = MatchDetailState(status=LoadStatus.DONE, match=view)

        response = client.get("/api/v1/matches/euw/EUW1_1", params={"puuid": "puuid-faker"})

        assert response.status_code == 200
        assert response.json()["viewerResult"] == "Victory"
        loader.load.assert_awaited_once_with("EUW1_1", Region.EUW, "puuid-faker")

    def test_not_found(self, client, loader):
        loader.load.return_value = MatchDetailState(
            status=LoadStatus.ERROR, error_message="Match not found"
        )
        loader.error_status = 404

        response = client.get("/api/v1/matches/EUW/EUW1_404")

        assert response.status_code == 404
        assert response.json()["detail"] == "Match not found"
