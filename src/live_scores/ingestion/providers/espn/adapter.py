from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from live_scores.ingestion.dates import utcnow
from live_scores.ingestion.providers.base.errors import ProviderCapabilityError
from live_scores.models.enums import ProviderEnum, SportType
from live_scores.models.game import Game
from live_scores.models.sport import GOLF, Sport
from live_scores.teams.resolver import TeamResolver

from .client import EspnClient
from .golf import normalize_leaderboard
from .scoreboard import normalize_scoreboard


@dataclass(frozen=True)
class EspnScoreboardAdapter:
    """
    ESPN scoreboard adapter (baseball, football, basketball; pro and college).
    """

    client: EspnClient
    teams: TeamResolver
    now: Callable[[], datetime] = utcnow
    provider_key: str = ProviderEnum.ESPN.value

    async def fetch_games(self, sport: Sport) -> list[Game]:
        if sport.sport_type in (SportType.HOCKEY, SportType.GOLF):
            raise ProviderCapabilityError(f"ESPN scoreboard adapter does not serve sport={sport}")

        payload = await self.client.get_scoreboard(sport)
        return normalize_scoreboard(payload, sport=sport, teams=self.teams, now=self.now())


@dataclass(frozen=True)
class EspnGolfAdapter:
    client: EspnClient
    now: Callable[[], datetime] = utcnow
    provider_key: str = ProviderEnum.ESPN.value

    async def fetch_games(self, sport: Sport) -> list[Game]:
        if sport != GOLF:
            raise ProviderCapabilityError(f"ESPN golf adapter does not serve sport={sport}")

        payload = await self.client.get_golf_leaderboard()
        return normalize_leaderboard(payload, now=self.now())
