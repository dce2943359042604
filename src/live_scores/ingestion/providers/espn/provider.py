from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from live_scores.ingestion.dates import utcnow
from live_scores.ingestion.providers.base.registry import AdapterRegistry
from live_scores.models.sport import GOLF
from live_scores.teams.resolver import TeamResolver

from .adapter import EspnGolfAdapter, EspnScoreboardAdapter
from .client import SCOREBOARD_ENDPOINTS, EspnClient


def register_espn_adapters(
    registry: AdapterRegistry,
    *,
    client: EspnClient,
    teams: TeamResolver,
    now: Callable[[], datetime] = utcnow,
) -> None:
    # Register every scoreboard sport (pro and college)
    for sport in SCOREBOARD_ENDPOINTS:
        registry.register(
            sport,
            factory=lambda: EspnScoreboardAdapter(client=client, teams=teams, now=now),
        )

    # Register golf leaderboard adapter
    registry.register(GOLF, factory=lambda: EspnGolfAdapter(client=client, now=now))
