from __future__ import annotations

from typing import Protocol

from live_scores.models.game import Game
from live_scores.models.sport import Sport


class SportAdapter(Protocol):
    """
    The aggregator depends on this, not on any HTTP client.

    An adapter fetches one provider document set for a sport and normalizes
    it into Games. Any failure raises and fails the whole batch for that sport.
    """

    provider_key: str

    async def fetch_games(self, sport: Sport) -> list[Game]:
        ...
