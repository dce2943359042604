from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from live_scores.ingestion.providers.base.client import BaseHttpClient
from live_scores.ingestion.providers.base.errors import ProviderCapabilityError
from live_scores.models.sport import (
    BASEBALL,
    BASKETBALL,
    COLLEGE_BASKETBALL,
    COLLEGE_FOOTBALL,
    FOOTBALL,
    Sport,
)

# sport -> (scoreboard path, query params)
SCOREBOARD_ENDPOINTS: dict[Sport, tuple[str, dict[str, str]]] = {
    BASEBALL: ("baseball/mlb/scoreboard", {}),
    FOOTBALL: ("football/nfl/scoreboard", {}),
    COLLEGE_FOOTBALL: ("football/college-football/scoreboard", {"groups": "80"}),
    BASKETBALL: ("basketball/nba/scoreboard", {}),
    COLLEGE_BASKETBALL: ("basketball/mens-college-basketball/scoreboard", {"groups": "50"}),
}

GOLF_LEADERBOARD_PATH = "golf/leaderboard"
GOLF_LEAGUE = "pga"


@dataclass
class EspnClient:
    http: BaseHttpClient

    async def get_scoreboard(self, sport: Sport) -> dict[str, Any]:
        try:
            path, params = SCOREBOARD_ENDPOINTS[sport]
        except KeyError:
            raise ProviderCapabilityError(f"ESPN has no scoreboard for sport={sport}") from None
        return await self.http.get_json(path, params=params or None)

    async def get_golf_leaderboard(self) -> dict[str, Any]:
        return await self.http.get_json(GOLF_LEADERBOARD_PATH, params={"league": GOLF_LEAGUE})
