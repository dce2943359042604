from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from live_scores.core.color import Color, ColorParseError, resolve_secondary
from live_scores.core.text import abbreviate_team_name
from live_scores.ingestion.providers.base import json_access as j
from live_scores.ingestion.providers.base.errors import ParseError
from live_scores.models.game import Team
from live_scores.models.sport import Sport

from .tables import TeamTables

logger = logging.getLogger(__name__)


def synthesize_team(raw_team: Mapping[str, Any]) -> Team:
    """Build a Team from a provider `team` object for ids missing from the static tables.

    The provider only gives one color, so the secondary is derived from the
    primary by the contrast rule.
    """

    team_id = j.get_numeric(raw_team, "id")
    location = j.get_str(raw_team, "location")
    name = j.get_str(raw_team, "name")
    abbreviation = j.get_str(raw_team, "abbreviation")
    color = j.get_str(raw_team, "color")

    try:
        primary = Color.from_hex(color)
        secondary = resolve_secondary(color, color)
    except ColorParseError as e:
        raise ParseError(
            f"team color is not a hex color: {e}",
            context={"field": "color", "team_id": team_id, "value": color},
        ) from e

    return Team(
        id=team_id,
        location=location,
        name=name,
        display_name=abbreviate_team_name(name),
        abbreviation=abbreviation,
        primary_color=primary,
        secondary_color=secondary,
    )


@dataclass(frozen=True)
class TeamResolver:
    tables: TeamTables

    def lookup(self, sport: Sport, team_id: int) -> Team | None:
        return self.tables.table_for(sport).get(team_id)

    def require(self, sport: Sport, team_id: int) -> Team:
        """Strict table lookup; unknown ids are a parse failure."""

        team = self.lookup(sport, team_id)
        if team is None:
            raise ParseError(
                f"Team {team_id} not present",
                context={"sport": str(sport), "team_id": team_id},
            )
        return team

    def lookup_or_create(self, sport: Sport, team_id: int, raw_team: Mapping[str, Any]) -> Team:
        team = self.lookup(sport, team_id)
        if team is not None:
            return team

        # Never written back to the tables.
        team = synthesize_team(raw_team)
        logger.info("Creating unknown %s team: %s (%s)", sport, team.id, team.name)
        return team

    def teams_for(self, sport: Sport) -> list[Team]:
        return sorted(self.tables.table_for(sport).values(), key=lambda t: t.id)
