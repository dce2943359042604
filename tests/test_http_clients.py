from __future__ import annotations

import asyncio

import httpx
import pytest

from live_scores.ingestion.providers.base.client import BaseHttpClient
from live_scores.ingestion.providers.base.errors import (
    DeserializationError,
    FetchError,
    ProviderCapabilityError,
    ProviderRateLimited,
)
from live_scores.ingestion.providers.espn.client import EspnClient
from live_scores.ingestion.providers.nhl.client import NhlClient
from live_scores.models.sport import BASKETBALL, COLLEGE_FOOTBALL, HOCKEY


def _get(handler, path: str = "schedule") -> dict:
    async def run() -> dict:
        async with BaseHttpClient(
            base_url="http://provider.test/api", transport=httpx.MockTransport(handler)
        ) as http:
            return await http.get_json(path)

    return asyncio.run(run())


def test_base_client_returns_json_objects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/schedule"
        return httpx.Response(200, json={"dates": []})

    assert _get(handler) == {"dates": []}


@pytest.mark.parametrize(
    ("response", "error"),
    [
        (httpx.Response(429), ProviderRateLimited),
        (httpx.Response(503, text="unavailable"), FetchError),
        (httpx.Response(200, text="<html>"), DeserializationError),
        (httpx.Response(200, json=[1, 2]), DeserializationError),
    ],
)
def test_base_client_error_mapping(response: httpx.Response, error: type[Exception]) -> None:
    with pytest.raises(error):
        _get(lambda request: response)


def test_base_client_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError):
        _get(handler)


def test_espn_client_builds_scoreboard_and_leaderboard_requests() -> None:
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"events": []})

    async def run() -> None:
        async with BaseHttpClient(
            base_url="http://espn.test/apis/site/v2/sports",
            transport=httpx.MockTransport(handler),
        ) as http:
            client = EspnClient(http=http)
            await client.get_scoreboard(COLLEGE_FOOTBALL)
            await client.get_scoreboard(BASKETBALL)
            await client.get_golf_leaderboard()
            with pytest.raises(ProviderCapabilityError):
                await client.get_scoreboard(HOCKEY)

    asyncio.run(run())

    assert [u.path for u in seen] == [
        "/apis/site/v2/sports/football/college-football/scoreboard",
        "/apis/site/v2/sports/basketball/nba/scoreboard",
        "/apis/site/v2/sports/golf/leaderboard",
    ]
    assert seen[0].params["groups"] == "80"
    assert "groups" not in seen[1].params
    assert seen[2].params["league"] == "pga"


def test_nhl_client_paths() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={})

    async def run() -> None:
        async with BaseHttpClient(
            base_url="http://nhl.test/api/v1", transport=httpx.MockTransport(handler)
        ) as http:
            client = NhlClient(http=http)
            await client.get_schedule()
            await client.get_linescore(2023020001)

    asyncio.run(run())

    assert seen == ["/api/v1/schedule", "/api/v1/game/2023020001/linescore"]
