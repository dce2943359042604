"""
Normalization of the ESPN PGA leaderboard document.

Golf events carry no teams. Each event becomes one Game whose extra data is
the event's display name and the top five of its leaderboard.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from live_scores.ingestion.dates import parse_minute_time, whole_hours_between
from live_scores.ingestion.providers.base import json_access as j
from live_scores.models.enums import Status
from live_scores.models.game import Game, GolfData, GolfPlayer
from live_scores.models.sport import GOLF

from .status import map_espn_status

logger = logging.getLogger(__name__)

Json = Mapping[str, Any]

GOLF_WINDOW_HOURS = 24
LEADERBOARD_SIZE = 5
TEAM_SCORING_SYSTEM = "Teamstroke"
EVEN_PAR = "E"
_TEAM_NAME_PREFIX_LEN = 5

EVENT_NAME_ALIASES: dict[str, str] = {
    "SHRINERS CHILDREN'S OPEN": "SHRINERS OPEN",
    "BUTTERFIELD BERMUDA CHAMPIONSHIP": "BERMUDA CHAMP",
    "WORLD WIDE TECHNOLOGY CHAMPIONSHIP AT MAYAKOBA": "WWT CHAMP",
    "FARMERS INSURANCE OPEN": "FARMERS OPEN",
    "SONY OPEN IN HAWAII": "SONY OPEN",
    "AT&T PEBBLE BEACH PRO-AM": "PEBBLE BEACH",
    "WASTE MANAGEMENT PHOENIX OPEN": "WM PHOENIX",
    "CORALES PUNTACANA CHAMPIONSHIP": "PUTACANA CHAMP",
    "VALERO TEXAS OPEN": "VALERO OPEN",
    "RBC CANADIAN OPEN": "RBC CANADIAN",
    "GENESIS SCOTTISH OPEN": "SCOTTISH OPEN",
    "THE CJ CUP IN SOUTH CAROLINA": "CJ CUP",
    "CADENCE BANK HOUSTON OPEN": "HOUSTON OPEN",
}

EVENT_NAME_STOP_WORDS = frozenset(
    {"TOURNAMENT", "CHAMPIONSHIP", "CHALLENGE", "CLASSIC", "INVITATIONAL"}
)

NAME_SUFFIXES = frozenset({"JR", "JR.", "SR", "SR.", "II", "III", "IV", "V", "VI"})

# "<anything> <Name A>/<Name B> <score>"
_RAW_DATA_LINE = re.compile(r".*\s([A-Za-z ]+)/([A-Za-z ]+)\s*(\S+)")


def clean_event_name(short_name: str) -> str:
    """'Sony Open in Hawaii' -> 'SONY OPEN'; 'The Sentry Tournament' -> 'THE SENTRY'."""

    name = short_name.upper()
    name = EVENT_NAME_ALIASES.get(name, name)
    return " ".join(word for word in name.split(" ") if word not in EVENT_NAME_STOP_WORDS)


def _score(competitor: Json) -> str:
    statistics = j.get_array(competitor, "statistics")
    if not statistics:
        return EVEN_PAR
    return j.get_str(statistics[0], "displayValue")


def _position(competitor: Json) -> int:
    return j.get_numeric(j.get_object(j.get_object(competitor, "status"), "position"), "id")


def player_from_competitor(competitor: Json) -> GolfPlayer:
    full_name = j.get_str(j.get_object(competitor, "athlete"), "displayName").upper()
    surname = next(
        (token for token in reversed(full_name.split(" ")) if token not in NAME_SUFFIXES),
        full_name,
    )
    return GolfPlayer(
        name=full_name,
        display_name=surname,
        score=_score(competitor),
        position=_position(competitor),
    )


def player_from_team(competitor: Json) -> GolfPlayer:
    """A two-player team entry; the name is the roster's last names joined by '/'."""

    last_names = [
        j.get_str(j.get_object(member, "athlete"), "lastName")[:_TEAM_NAME_PREFIX_LEN]
        for member in j.get_array(competitor, "roster")
    ]
    name = "/".join(last_names).upper()
    return GolfPlayer(
        name=name,
        display_name=name,
        score=_score(competitor),
        position=_position(competitor),
    )


def player_from_raw_line(line: str, position: int) -> GolfPlayer | None:
    match = _RAW_DATA_LINE.search(line)
    if match is None:
        return None

    first, second, score = (group.strip() for group in match.groups())
    name = f"{first[:_TEAM_NAME_PREFIX_LEN]}/{second[:_TEAM_NAME_PREFIX_LEN]}"
    return GolfPlayer(name=name, display_name=name, score=score, position=position)


def players_from_raw_data(raw_data: str) -> list[GolfPlayer]:
    # Position is the line index; lines that are not player rows still count.
    players = []
    for position, line in enumerate(raw_data.split("\n")):
        player = player_from_raw_line(line, position)
        if player is not None:
            players.append(player)
        if len(players) == LEADERBOARD_SIZE:
            break
    return players


def _top(players: Sequence[GolfPlayer]) -> list[GolfPlayer]:
    return sorted(players, key=lambda p: p.position)[:LEADERBOARD_SIZE]


def _start_time(competition: Json, competitors: Sequence[Any]) -> datetime:
    """Earliest player tee time, or the competition date when nobody has one."""

    tee_times = []
    for competitor in competitors:
        tee_time = j.get_str(j.get_object(competitor, "status"), "teeTime", default=None)
        if tee_time is not None:
            tee_times.append(parse_minute_time(tee_time, field="teeTime"))
    if tee_times:
        return min(tee_times)
    return parse_minute_time(j.get_str(competition, "date"))


def normalize_golf_event(event: Json, *, now: datetime) -> Game | None:
    competition = j.first_item(j.get_array(event, "competitions"), "competitions")
    competitors = j.get_array(competition, "competitors")

    status_obj = j.get_object(competition, "status")
    status_code = j.get_str(j.get_object(status_obj, "type"), "name")
    status = map_espn_status(status_code)
    if status == Status.INVALID:
        logger.info("Skipping golf event with status %s", status_code)
        return None

    ordinal = str(j.get_numeric(status_obj, "period"))
    game_id = j.get_numeric(competition, "id")

    start_time = _start_time(competition, competitors)
    delta_hours = whole_hours_between(now, start_time)
    if delta_hours > GOLF_WINDOW_HOURS and status not in (Status.ACTIVE, Status.END):
        logger.debug("Skipping golf event %s: %sh away, status %s", game_id, delta_hours, status)
        return None

    scoring_system = j.get_str(j.get_object(competition, "scoringSystem"), "name")

    # A tee time in the future means the day's play is over.
    if status == Status.ACTIVE and start_time > now:
        status = Status.END

    if scoring_system == TEAM_SCORING_SYSTEM:
        raw_data = j.get_str(competition, "rawData", default=None)
        if raw_data is not None:
            if status == Status.ACTIVE and "COMPLETE" in raw_data:
                status = Status.END
            players = players_from_raw_data(raw_data)
        else:
            players = _top([player_from_team(c) for c in competitors])
    else:
        players = _top([player_from_competitor(c) for c in competitors])

    return Game(
        game_id=game_id,
        sport=GOLF,
        status=status,
        start_time=start_time,
        period=0,
        ordinal=ordinal,
        extra=GolfData(
            event_name=clean_event_name(j.get_str(event, "shortName")),
            players=tuple(players),
        ),
    )


def normalize_leaderboard(payload: Json, *, now: datetime) -> list[Game]:
    games: list[Game] = []
    for event in j.get_array(payload, "events"):
        game = normalize_golf_event(event, now=now)
        if game is not None:
            games.append(game)
    return games
