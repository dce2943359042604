from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from live_scores.models.game import Game
from live_scores.models.sport import Sport

from .aggregator import Aggregator

logger = logging.getLogger(__name__)

FRESHNESS_WINDOW_S = 60.0


class SportUnavailableError(RuntimeError):
    """At least one requested sport has no usable data (failed now or within the window)."""

    def __init__(self, sports: Iterable[Sport]) -> None:
        self.sports = tuple(sports)
        super().__init__(
            "Failed to retrieve data for: " + ", ".join(str(sport) for sport in self.sports)
        )


@dataclass(frozen=True)
class CacheEntry:
    last_updated: float
    # None marks a failed fetch.
    games: tuple[Game, ...] | None

    @property
    def failed(self) -> bool:
        return self.games is None


class ScoreCache:
    """
    Per-sport TTL cache in front of an Aggregator.

    - A fresh entry is served as a new list; a fresh failure fails the whole call.
    - Stale or missing sports are refetched concurrently with the lock released.
    - Every refetch result, success or failure, is written back before the
      call returns or raises.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        *,
        ttl_s: float = FRESHNESS_WINDOW_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._aggregator = aggregator
        self._ttl_s = ttl_s
        self._clock = clock
        self._entries: dict[Sport, CacheEntry] = {}
        self._lock = asyncio.Lock()

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.last_updated < self._ttl_s

    async def get(self, sports: Iterable[Sport]) -> dict[Sport, list[Game]]:
        requested = list(dict.fromkeys(sports))
        out: dict[Sport, list[Game]] = {}
        stale: list[Sport] = []

        async with self._lock:
            now = self._clock()
            for sport in requested:
                entry = self._entries.get(sport)
                if entry is None or not self._is_fresh(entry, now):
                    stale.append(sport)
                elif entry.failed:
                    logger.debug("Serving cached failure for %s", sport)
                    raise SportUnavailableError([sport])
                else:
                    out[sport] = list(entry.games)

        if not stale:
            return out

        logger.debug("Refetching %s", ", ".join(str(s) for s in stale))
        results = await self._aggregator.fetch_many(stale)

        failed: list[Sport] = []
        async with self._lock:
            now = self._clock()
            for sport in stale:
                result = results[sport]
                games = tuple(result.games) if result.ok else None
                self._entries[sport] = CacheEntry(last_updated=now, games=games)
                if games is None:
                    failed.append(sport)
                else:
                    out[sport] = list(games)

        if failed:
            raise SportUnavailableError(failed)
        return {sport: out[sport] for sport in requested}

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
