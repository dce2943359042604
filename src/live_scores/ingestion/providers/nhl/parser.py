"""
NHL stats API normalization.

Hockey is built in two passes: `parse_schedule` turns today's schedule into
placeholder games (ids, teams, start time), then `apply_linescore` replaces
each placeholder with a copy carrying score, period, status and power play
data from that game's linescore.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from live_scores.ingestion.dates import parse_iso_z
from live_scores.ingestion.providers.base import json_access as j
from live_scores.models.enums import Status
from live_scores.models.game import Game, HockeyData
from live_scores.models.sport import HOCKEY
from live_scores.teams.resolver import TeamResolver

logger = logging.getLogger(__name__)

Json = Mapping[str, Any]

POSTPONED = "Postponed"
FINAL = "Final"
END_OF_PERIOD = "END"
FULL_PERIOD = "20:00"
DEFAULT_ORDINAL = "1st"
DEFAULT_SKATERS = 5
REGULATION_PERIODS = 3
INTERMISSION_SUFFIX = " INT"


def parse_schedule(payload: Json, *, teams: TeamResolver) -> list[Game]:
    """Placeholder games for the first date in the schedule (none when there are no dates)."""

    dates = j.get_array(payload, "dates")
    if not dates:
        return []

    games: list[Game] = []
    for item in j.get_array(dates[0], "games"):
        detailed_state = j.get_str(j.get_object(item, "status"), "detailedState")
        if detailed_state == POSTPONED:
            logger.debug("Skipping postponed hockey game %s", item.get("gamePk"))
            continue

        side = j.get_object(item, "teams")
        away_id = j.get_int(j.get_object(j.get_object(side, "away"), "team"), "id")
        home_id = j.get_int(j.get_object(j.get_object(side, "home"), "team"), "id")

        games.append(
            Game(
                game_id=j.get_int(item, "gamePk"),
                sport=HOCKEY,
                # Corrected by the linescore pass.
                status=Status.PREGAME,
                start_time=parse_iso_z(j.get_str(item, "gameDate"), field="gameDate"),
                home_team=teams.require(HOCKEY, home_id),
                away_team=teams.require(HOCKEY, away_id),
            )
        )
    return games


def hockey_status(
    period_time: str, period: int, home_score: int, away_score: int
) -> tuple[Status, bool]:
    """Return (status, is_intermission) for a linescore clock reading.

    Rules are checked in order, so period 2 or later at "20:00" is an
    intermission rather than play in progress.
    """

    if period_time == FINAL:
        return Status.END, False
    if period_time == END_OF_PERIOD:
        if period >= REGULATION_PERIODS and home_score != away_score:
            return Status.END, False
        return Status.INTERMISSION, True
    if period_time == FULL_PERIOD and period > 1:
        return Status.INTERMISSION, True
    if period_time == FULL_PERIOD and period >= 1:
        return Status.ACTIVE, False
    return Status.PREGAME, False


def apply_linescore(game: Game, linescore: Json) -> Game:
    side = j.get_object(linescore, "teams")
    away = j.get_object(side, "away")
    home = j.get_object(side, "home")

    away_score = j.get_int(away, "goals", default=0)
    home_score = j.get_int(home, "goals", default=0)

    extra = HockeyData(
        away_powerplay=j.get_bool(away, "powerPlay"),
        home_powerplay=j.get_bool(home, "powerPlay"),
        away_players=j.get_int(away, "numSkaters", default=DEFAULT_SKATERS),
        home_players=j.get_int(home, "numSkaters", default=DEFAULT_SKATERS),
    )

    period = j.get_int(linescore, "currentPeriod")
    period_time = j.get_str(linescore, "currentPeriodTimeRemaining", default=FULL_PERIOD)

    ordinal = game.ordinal
    if period >= 1:
        ordinal = j.get_str(linescore, "currentPeriodOrdinal", default=DEFAULT_ORDINAL)

    status, intermission = hockey_status(period_time, period, home_score, away_score)
    if intermission:
        ordinal += INTERMISSION_SUFFIX

    return replace(
        game,
        status=status,
        home_score=home_score,
        away_score=away_score,
        period=period,
        ordinal=ordinal,
        extra=extra,
    )
