from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Any

from live_scores.core.color import Color
from live_scores.ingestion.providers.base.errors import ProviderCapabilityError
from live_scores.models.enums import SportType
from live_scores.models.game import Team
from live_scores.models.sport import Sport

TeamTable = Mapping[int, Team]

_DATA_PACKAGE = "live_scores.teams"
_TABLE_FILES = ("hockey", "baseball", "football", "basketball", "college")


def _team_from_row(row: Mapping[str, Any]) -> Team:
    return Team(
        id=int(row["id"]),
        location=row["location"],
        name=row["name"],
        display_name=row["display_name"],
        abbreviation=row["abbreviation"],
        primary_color=Color.from_hex(row["primary_color"]),
        secondary_color=Color.from_hex(row["secondary_color"]),
    )


def _load_table(name: str) -> TeamTable:
    resource = resources.files(_DATA_PACKAGE).joinpath("data").joinpath(f"{name}.json")
    rows = json.loads(resource.read_text(encoding="utf-8"))
    return MappingProxyType({team.id: team for team in map(_team_from_row, rows)})


@dataclass(frozen=True)
class TeamTables:
    """Static, read-only team tables keyed by provider team id."""

    hockey: TeamTable
    baseball: TeamTable
    football: TeamTable
    basketball: TeamTable
    college: TeamTable

    def table_for(self, sport: Sport) -> TeamTable:
        if sport.sport_type == SportType.GOLF:
            raise ProviderCapabilityError(f"No team table for sport={sport}")
        if sport.sport_type == SportType.HOCKEY:
            return self.hockey
        if sport.sport_type == SportType.BASEBALL:
            return self.baseball
        if sport.is_collegiate:
            return self.college
        if sport.sport_type == SportType.FOOTBALL:
            return self.football
        return self.basketball


def load_team_tables() -> TeamTables:
    """Read the bundled JSON tables. Call once at startup and share the result."""

    return TeamTables(**{name: _load_table(name) for name in _TABLE_FILES})
