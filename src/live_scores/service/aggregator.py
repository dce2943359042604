from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from live_scores.ingestion.providers.base.registry import AdapterRegistry
from live_scores.models.game import Game
from live_scores.models.sport import ALL_SPORTS, Sport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SportResult:
    """Outcome of one sport's fetch: exactly one of `games` / `error` is set."""

    sport: Sport
    games: list[Game] | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Aggregator:
    """Fetches sports concurrently through the adapters in a registry."""

    def __init__(self, registry: AdapterRegistry) -> None:
        self._registry = registry

    async def fetch_sport(self, sport: Sport) -> list[Game]:
        adapter = self._registry.get(sport)
        logger.debug("Fetching %s via %s", sport, adapter.provider_key)
        games = await adapter.fetch_games(sport)
        logger.debug("Fetched %d %s games", len(games), sport)
        return games

    async def _fetch_result(self, sport: Sport) -> SportResult:
        try:
            games = await self.fetch_sport(sport)
        except Exception as e:
            logger.exception("Failed to fetch %s", sport)
            return SportResult(sport=sport, error=e)
        return SportResult(sport=sport, games=games)

    async def fetch_many(self, sports: Iterable[Sport]) -> dict[Sport, SportResult]:
        """One task per distinct sport; a failure in one never cancels the others."""

        unique = list(dict.fromkeys(sports))
        results = await asyncio.gather(*(self._fetch_result(sport) for sport in unique))
        return {result.sport: result for result in results}

    async def fetch_all(self) -> dict[Sport, SportResult]:
        return await self.fetch_many(ALL_SPORTS)
