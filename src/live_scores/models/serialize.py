from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict
from enum import Enum
from typing import Any

from live_scores.core.color import Color
from live_scores.models.game import Game, Team
from live_scores.models.sport import Sport

Json = dict[str, Any]


def color_to_dict(color: Color) -> Json:
    return {"r": color.r, "g": color.g, "b": color.b}


def team_to_dict(team: Team) -> Json:
    return {
        "id": team.id,
        "location": team.location,
        "name": team.name,
        "display_name": team.display_name,
        "abbreviation": team.abbreviation,
        "primary_color": color_to_dict(team.primary_color),
        "secondary_color": color_to_dict(team.secondary_color),
    }


def _extra_to_dict(game: Game) -> Json | None:
    if game.extra is None:
        return None

    data = asdict(game.extra)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
        elif isinstance(value, tuple):
            data[key] = list(value)
    # Tagged by sport family so clients can switch on it.
    return {"type": game.sport.sport_type.value, **data}


def game_to_dict(game: Game) -> Json:
    return {
        "game_id": game.game_id,
        "sport": str(game.sport),
        "home_team": team_to_dict(game.home_team) if game.home_team else None,
        "away_team": team_to_dict(game.away_team) if game.away_team else None,
        "home_score": game.home_score,
        "away_score": game.away_score,
        "status": game.status.value,
        "period": game.period,
        "ordinal": game.ordinal,
        "start_time": game.start_time.isoformat(),
        "extra": _extra_to_dict(game),
    }


def scores_to_dict(scores: Mapping[Sport, Sequence[Game]]) -> dict[str, list[Json]]:
    """Render a sport -> games mapping keyed by sport token."""

    return {str(sport): [game_to_dict(g) for g in games] for sport, games in scores.items()}
