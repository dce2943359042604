"""
Normalization of the ESPN scoreboard document (baseball, football, basketball).

One event becomes at most one Game. Any malformed event fails the whole
document; postponed / cancelled events and events outside the time window are
skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from live_scores.core.text import ordinal as ordinal_word
from live_scores.ingestion.dates import parse_minute_time, whole_hours_between
from live_scores.ingestion.providers.base import json_access as j
from live_scores.ingestion.providers.base.errors import ParseError
from live_scores.models.enums import Possession, SportType, Status
from live_scores.models.game import (
    BaseballData,
    BasketballData,
    ExtraGameData,
    FootballData,
    Game,
    Team,
)
from live_scores.models.sport import Sport
from live_scores.teams.resolver import TeamResolver

from .status import HALFTIME, map_espn_status

logger = logging.getLogger(__name__)

# Events further than this from "now" (either direction) are not shown.
SCOREBOARD_WINDOW_HOURS = 12

Json = Mapping[str, Any]


def split_competitors(competitors: Sequence[Any]) -> tuple[Json, Json]:
    """Return (home, away).

    Uses the `homeAway` marker when both competitors carry one, else the
    first competitor is home.
    """

    if len(competitors) != 2:
        raise ParseError(
            "Expected exactly two competitors",
            context={"field": "competitors", "count": len(competitors)},
        )

    first, second = competitors
    markers = (
        j.get_str(first, "homeAway", default=None),
        j.get_str(second, "homeAway", default=None),
    )
    if markers == ("away", "home"):
        return second, first
    return first, second


def scoreboard_ordinal(status: Status, status_code: str, period: int) -> str:
    if status_code == HALFTIME:
        return "HALFTIME"
    text = ordinal_word(period)
    if status == Status.INTERMISSION:
        text += " INT"
    return text


def baseball_data(competition: Json) -> BaseballData:
    situation = j.get_object(competition, "situation", default=None)
    status_type = j.get_object(j.get_object(competition, "status"), "type")
    is_inning_top = "Top" in j.get_str(status_type, "shortDetail")

    if situation is None:
        return BaseballData(is_inning_top=is_inning_top)

    return BaseballData(
        balls=j.get_numeric(situation, "balls", default=0),
        strikes=j.get_numeric(situation, "strikes", default=0),
        outs=j.get_numeric(situation, "outs", default=0),
        is_inning_top=is_inning_top,
        on_first=j.get_bool(situation, "onFirst", default=False),
        on_second=j.get_bool(situation, "onSecond", default=False),
        on_third=j.get_bool(situation, "onThird", default=False),
    )


def football_data(competition: Json, *, status: Status, home: Team, away: Team) -> FootballData:
    situation = j.get_object(competition, "situation", default=None)
    if situation is None:
        return FootballData()

    time_remaining = ""
    if status == Status.ACTIVE:
        time_remaining = j.get_str(j.get_object(competition, "status"), "displayClock", default="")

    possession = Possession.NONE
    possessing_id = j.get_numeric(situation, "possession", default=None)
    if possessing_id is not None:
        if possessing_id == home.id:
            possession = Possession.HOME
        elif possessing_id == away.id:
            possession = Possession.AWAY

    return FootballData(
        time_remaining=time_remaining,
        ball_position=j.get_str(situation, "possessionText", default=""),
        down_string=j.get_str(situation, "shortDownDistanceText", default="").replace("&", "+"),
        possession=possession,
    )


def _extra_data(
    sport: Sport, competition: Json, *, status: Status, home: Team, away: Team
) -> ExtraGameData:
    if sport.sport_type == SportType.BASEBALL:
        return baseball_data(competition)
    if sport.sport_type == SportType.FOOTBALL:
        return football_data(competition, status=status, home=home, away=away)
    if sport.sport_type == SportType.BASKETBALL:
        return BasketballData()
    raise ParseError(f"No scoreboard extra data for sport={sport}", context={"sport": str(sport)})


def _resolve_team(sport: Sport, competitor: Json, teams: TeamResolver) -> Team:
    raw_team = j.get_object(competitor, "team")
    return teams.lookup_or_create(sport, j.get_numeric(raw_team, "id"), raw_team)


def normalize_event(
    event: Json, *, sport: Sport, teams: TeamResolver, now: datetime
) -> Game | None:
    """Normalize one scoreboard event, or return None when it should be skipped."""

    competition = j.first_item(j.get_array(event, "competitions"), "competitions")
    home, away = split_competitors(j.get_array(competition, "competitors"))

    status_obj = j.get_object(competition, "status")
    status_code = j.get_str(j.get_object(status_obj, "type"), "name")
    status = map_espn_status(status_code)
    if status == Status.INVALID:
        logger.debug("Skipping %s event with status %s", sport, status_code)
        return None

    start_time = parse_minute_time(j.get_str(competition, "date"))
    delta_hours = whole_hours_between(now, start_time)
    if delta_hours > SCOREBOARD_WINDOW_HOURS:
        logger.debug("Skipping %s event %sh from now", sport, delta_hours)
        return None

    period = j.get_numeric(status_obj, "period")
    home_team = _resolve_team(sport, home, teams)
    away_team = _resolve_team(sport, away, teams)

    return Game(
        game_id=j.get_numeric(competition, "id"),
        sport=sport,
        status=status,
        start_time=start_time,
        home_team=home_team,
        away_team=away_team,
        home_score=j.get_numeric(home, "score"),
        away_score=j.get_numeric(away, "score"),
        period=period,
        ordinal=scoreboard_ordinal(status, status_code, period),
        extra=_extra_data(sport, competition, status=status, home=home_team, away=away_team),
    )


def normalize_scoreboard(
    payload: Json, *, sport: Sport, teams: TeamResolver, now: datetime
) -> list[Game]:
    games: list[Game] = []
    for event in j.get_array(payload, "events"):
        game = normalize_event(event, sport=sport, teams=teams, now=now)
        if game is not None:
            games.append(game)
    return games
