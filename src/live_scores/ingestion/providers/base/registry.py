from __future__ import annotations

from typing import Callable

from live_scores.models.sport import Sport

from .adapter import SportAdapter
from .errors import ProviderCapabilityError

AdapterFactory = Callable[[], SportAdapter]


class AdapterRegistry:
    def __init__(self) -> None:
        self._factories: dict[Sport, AdapterFactory] = {}

    def register(self, sport: Sport, factory: AdapterFactory) -> None:
        if sport in self._factories:
            raise ValueError(f"Duplicate adapter registration: {sport}")
        self._factories[sport] = factory

    def get(self, sport: Sport) -> SportAdapter:
        factory = self._factories.get(sport)
        if factory is None:
            raise ProviderCapabilityError(f"No adapter registered for sport={sport}")
        return factory()

    @property
    def sports(self) -> frozenset[Sport]:
        return frozenset(self._factories)
