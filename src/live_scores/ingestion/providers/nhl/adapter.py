from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from live_scores.ingestion.providers.base.errors import ProviderCapabilityError
from live_scores.models.enums import ProviderEnum
from live_scores.models.game import Game
from live_scores.models.sport import HOCKEY, Sport
from live_scores.teams.resolver import TeamResolver

from .client import NhlClient
from .parser import apply_linescore, parse_schedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NhlHockeyAdapter:
    """
    NHL stats API adapter: schedule first, then one linescore per game.
    """

    client: NhlClient
    teams: TeamResolver
    provider_key: str = ProviderEnum.NHL.value

    async def fetch_games(self, sport: Sport) -> list[Game]:
        if sport != HOCKEY:
            raise ProviderCapabilityError(f"NHL adapter does not serve sport={sport}")

        placeholders = parse_schedule(await self.client.get_schedule(), teams=self.teams)
        if not placeholders:
            return []

        # Every linescore fetch runs to completion before any failure is raised.
        linescores = await asyncio.gather(
            *(self.client.get_linescore(game.game_id) for game in placeholders),
            return_exceptions=True,
        )
        failures = [r for r in linescores if isinstance(r, BaseException)]
        if failures:
            logger.warning(
                "%d of %d hockey linescore fetches failed", len(failures), len(placeholders)
            )
            raise failures[0]

        return [apply_linescore(game, ls) for game, ls in zip(placeholders, linescores)]
