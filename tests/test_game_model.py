from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from datetime import UTC, datetime

import pytest

from live_scores.core.color import BLACK, WHITE
from live_scores.models.enums import Status
from live_scores.models.game import BaseballData, Game, GolfData, HockeyData, Team
from live_scores.models.sport import GOLF, HOCKEY

START = datetime(2023, 10, 15, 23, 0, tzinfo=UTC)


def _team(team_id: int) -> Team:
    return Team(
        id=team_id,
        location="Town",
        name=f"Team {team_id}",
        display_name=f"Team {team_id}",
        abbreviation=f"T{team_id}",
        primary_color=BLACK,
        secondary_color=WHITE,
    )


def test_game_rejects_invalid_status() -> None:
    with pytest.raises(ValueError, match="INVALID"):
        Game(game_id=1, sport=HOCKEY, status=Status.INVALID, start_time=START)


def test_game_requires_both_teams_or_neither() -> None:
    with pytest.raises(ValueError, match="both teams"):
        Game(game_id=1, sport=HOCKEY, status=Status.PREGAME, start_time=START, home_team=_team(1))


def test_golf_cannot_have_teams() -> None:
    with pytest.raises(ValueError, match="Golf"):
        Game(
            game_id=1,
            sport=GOLF,
            status=Status.ACTIVE,
            start_time=START,
            home_team=_team(1),
            away_team=_team(2),
        )


def test_extra_data_must_match_the_sport() -> None:
    with pytest.raises(ValueError, match="BaseballData"):
        Game(
            game_id=1,
            sport=HOCKEY,
            status=Status.ACTIVE,
            start_time=START,
            extra=BaseballData(),
        )


def test_game_is_immutable_and_copied_with_replace() -> None:
    game = Game(
        game_id=7,
        sport=HOCKEY,
        status=Status.PREGAME,
        start_time=START,
        home_team=_team(1),
        away_team=_team(2),
    )
    with pytest.raises(FrozenInstanceError):
        game.home_score = 3  # type: ignore[misc]

    live = replace(
        game,
        status=Status.ACTIVE,
        home_score=3,
        extra=HockeyData(
            away_powerplay=False, home_powerplay=True, away_players=4, home_players=5
        ),
    )
    assert live.home_score == 3
    assert game.home_score == 0
    assert live.home_team == game.home_team


def test_golf_game_without_teams() -> None:
    game = Game(
        game_id=9,
        sport=GOLF,
        status=Status.END,
        start_time=START,
        ordinal="4",
        extra=GolfData(event_name="SONY OPEN"),
    )
    assert game.home_team is None
    assert game.period == 0
