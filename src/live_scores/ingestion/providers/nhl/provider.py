from __future__ import annotations

from live_scores.ingestion.providers.base.registry import AdapterRegistry
from live_scores.models.sport import HOCKEY
from live_scores.teams.resolver import TeamResolver

from .adapter import NhlHockeyAdapter
from .client import NhlClient


def register_nhl_adapters(
    registry: AdapterRegistry,
    *,
    client: NhlClient,
    teams: TeamResolver,
) -> None:
    registry.register(HOCKEY, factory=lambda: NhlHockeyAdapter(client=client, teams=teams))
