from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from live_scores.ingestion.providers.base.client import BaseHttpClient


@dataclass
class NhlClient:
    http: BaseHttpClient

    async def get_schedule(self) -> dict[str, Any]:
        return await self.http.get_json("schedule")

    async def get_linescore(self, game_id: int) -> dict[str, Any]:
        return await self.http.get_json(f"game/{game_id}/linescore")
