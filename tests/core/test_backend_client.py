"""
Tests for the backend API client: error extraction, status mapping and
defensive shape coercion.
"""

import httpx
import pytest

from lol_tracker.core.backend_api import (
    BackendAPIClient,
    BadRequestError,
    NotFoundError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedResponseError,
)
from lol_tracker.core.backend_api.client import UNKNOWN_NETWORK_ERROR, read_error_message
from lol_tracker.core.enums import Region

BACKEND_URL = "http://backend.test"


def _client_for(handler) -> BackendAPIClient:
    return BackendAPIClient(base_url=BACKEND_URL, transport=httpx.MockTransport(handler))


class TestReadErrorMessage:
    """Test cases for read_error_message."""

    def test_json_message(self):
        response = httpx.Response(404, json={"message": "Summoner not found"})
        assert read_error_message(response) == "Summoner not found"

    def test_json_error_field(self):
        response = httpx.Response(400, json={"error": "Bad region"})
        assert read_error_message(response) == "Bad region"

    def test_json_without_message_uses_status_line(self):
        response = httpx.Response(500, json={"detail": "x"})
        assert read_error_message(response) == "Error 500: Internal Server Error"

    def test_plain_text_body(self):
        response = httpx.Response(503, text="Riot API is down")
        assert read_error_message(response) == "Riot API is down"

    def test_empty_body(self):
        response = httpx.Response(502)
        assert read_error_message(response) == "Status 502"

    def test_undecodable_json(self):
        response = httpx.Response(
            500, content=b"{not json", headers={"content-type": "application/json"}
        )
        assert read_error_message(response) == UNKNOWN_NETWORK_ERROR


async def test_get_account(api_client, backend):
    """Test resolving an account by Riot ID."""
    backend.add_account("Faker", "KR1", "puuid-faker", region="KR")

    account = await api_client.get_account("Faker", "KR1", Region.KR)

    assert account.puuid == "puuid-faker"
    assert account.game_name == "Faker"
    assert account.tag_line == "KR1"
    assert account.profile_icon_id == 588


async def test_get_account_not_found_carries_message(api_client):
    with pytest.raises(NotFoundError) as exc_info:
        await api_client.get_account("Nobody", "0000", Region.EUW)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Summoner not found"


async def test_status_codes_map_to_error_classes(api_client, backend):
    backend.fail("/api/summoner", 400, {"message": "Invalid Riot ID"})
    with pytest.raises(BadRequestError):
        await api_client.get_account("a", "b", Region.NA)

    backend.fail("/api/summoner", 503, "Upstream unavailable")
    with pytest.raises(ServiceUnavailableError) as exc_info:
        await api_client.get_account("a", "b", Region.NA)
    assert exc_info.value.message == "Upstream unavailable"


async def test_transport_failure():
    """Test that connection errors surface as TransportError without a status."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client_for(handler)
    try:
        with pytest.raises(TransportError) as exc_info:
            await client.get_ranked_entries("puuid", Region.EUW)
    finally:
        await client.close()

    assert exc_info.value.status_code is None
    assert exc_info.value.message == UNKNOWN_NETWORK_ERROR


async def test_invalid_json_on_success():
    def handler(request):
        return httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})

    client = _client_for(handler)
    try:
        with pytest.raises(UnexpectedResponseError):
            await client.get_account("a", "b", Region.EUW)
    finally:
        await client.close()


async def test_non_list_payloads_coerce_to_empty():
    """Test list endpoints return [] for any non-list body."""

    def handler(request):
        return httpx.Response(200, json={"unexpected": "object"})

    client = _client_for(handler)
    try:
        assert await client.get_match_summaries("puuid", Region.EUW) == []
        assert await client.get_ranked_entries("puuid", Region.EUW) == []
        assert await client.list_favorites() == []
    finally:
        await client.close()


async def test_invalid_list_items_are_dropped(api_client, backend, make_match):
    backend.matches["puuid-1"] = [
        make_match(matchId="EUW1_1"),
        {"matchId": "EUW1_2"},
        make_match(matchId="EUW1_3", kills=-1),
        make_match(matchId="EUW1_4"),
    ]

    matches = await api_client.get_match_summaries("puuid-1", Region.EUW)

    assert [m.match_id for m in matches] == ["EUW1_1", "EUW1_4"]


async def test_match_summaries_sends_window_size():
    seen = {}

    def handler(request):
        seen.update(dict(request.url.params))
        return httpx.Response(200, json=[])

    client = _client_for(handler)
    try:
        await client.get_match_summaries("puuid-1", Region.OCE, count=20)
    finally:
        await client.close()

    assert seen == {"puuid": "puuid-1", "region": "OCE", "count": "20"}


async def test_check_is_favorite_reads_failures_as_false(api_client, backend):
    backend.favorites.append(
        {"id": 1, "puuid": "puuid-1", "gameName": "A", "tagLine": "1", "region": "EUW"}
    )
    assert await api_client.check_is_favorite("puuid-1") is True
    assert await api_client.check_is_favorite("puuid-2") is False

    backend.fail("/api/favorites/check/puuid-1", 500, "boom")
    assert await api_client.check_is_favorite("puuid-1") is False


async def test_favorite_add_and_remove(api_client, backend):
    favorite = await api_client.add_favorite("puuid-1", "Faker", "KR1", Region.KR)

    assert favorite.id == 1
    assert favorite.region == "KR"
    assert [f["puuid"] for f in backend.favorites] == ["puuid-1"]

    assert await api_client.remove_favorite("puuid-1") is None
    assert backend.favorites == []


async def test_session_is_reused(api_client, backend):
    await api_client.get_ranked_entries("puuid", Region.EUW)
    session = api_client.session
    await api_client.get_ranked_entries("puuid", Region.EUW)

    assert api_client.session is session
    assert backend.calls["/api/ranked"] == 2


@pytest.mark.parametrize(
    "overrides",
    [{"winRate": 100.4}, {"winRate": -1}, {"totalGames": 2, "wins": 3}],
)
async def test_out_of_range_stats_are_unexpected(api_client, backend, overrides):
    backend.stats["puuid-1"] = {"totalGames": 3, "wins": 2, "losses": 1, **overrides}

    with pytest.raises(UnexpectedResponseError):
        await api_client.get_player_stats("puuid-1", Region.EUW)
