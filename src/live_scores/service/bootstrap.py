from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager

import httpx

from live_scores.core.config import Settings, settings as default_settings
from live_scores.ingestion.providers.base.client import BaseHttpClient
from live_scores.ingestion.providers.base.registry import AdapterRegistry
from live_scores.ingestion.providers.espn.client import EspnClient
from live_scores.ingestion.providers.espn.provider import register_espn_adapters
from live_scores.ingestion.providers.nhl.client import NhlClient
from live_scores.ingestion.providers.nhl.provider import register_nhl_adapters
from live_scores.teams.resolver import TeamResolver
from live_scores.teams.tables import load_team_tables

from .aggregator import Aggregator
from .cache import ScoreCache


def build_registry(*, espn: EspnClient, nhl: NhlClient, teams: TeamResolver) -> AdapterRegistry:
    registry = AdapterRegistry()
    register_espn_adapters(registry, client=espn, teams=teams)
    register_nhl_adapters(registry, client=nhl, teams=teams)
    return registry


@asynccontextmanager
async def open_score_cache(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[ScoreCache]:
    """
    Wire HTTP clients, team tables, adapters and aggregator into a ScoreCache.

    The HTTP clients are closed when the context exits.
    """
    cfg = settings or default_settings
    teams = TeamResolver(load_team_tables())

    async with AsyncExitStack() as stack:
        espn_http = await stack.enter_async_context(
            BaseHttpClient(
                base_url=cfg.espn_base_url,
                timeout_s=cfg.http_timeout_s,
                connect_timeout_s=cfg.http_connect_timeout_s,
                transport=transport,
            )
        )
        nhl_http = await stack.enter_async_context(
            BaseHttpClient(
                base_url=cfg.nhl_base_url,
                timeout_s=cfg.http_timeout_s,
                connect_timeout_s=cfg.http_connect_timeout_s,
                transport=transport,
            )
        )
        registry = build_registry(
            espn=EspnClient(http=espn_http), nhl=NhlClient(http=nhl_http), teams=teams
        )
        yield ScoreCache(Aggregator(registry))
