from __future__ import annotations

import pytest

from live_scores.core.color import WHITE, Color
from live_scores.ingestion.providers.base.errors import ParseError, ProviderCapabilityError
from live_scores.models.sport import (
    BASEBALL,
    BASKETBALL,
    COLLEGE_FOOTBALL,
    FOOTBALL,
    GOLF,
    HOCKEY,
)
from live_scores.teams import TeamResolver, load_team_tables


@pytest.fixture(scope="module")
def resolver() -> TeamResolver:
    return TeamResolver(load_team_tables())


def _raw_team(**overrides: object) -> dict[str, object]:
    raw: dict[str, object] = {
        "id": "2000",
        "location": "NC State",
        "name": "North Carolina State",
        "abbreviation": "NCST",
        "color": "cc0000",
    }
    raw.update(overrides)
    return raw


def test_static_tables_are_loaded(resolver: TeamResolver) -> None:
    devils = resolver.require(HOCKEY, 1)
    assert devils.abbreviation == "NJD"
    assert devils.primary_color == Color.from_hex("c8102e")
    assert len(resolver.teams_for(HOCKEY)) == 38
    assert resolver.lookup(FOOTBALL, 12).abbreviation == "KC"
    assert resolver.lookup(BASKETBALL, 2).name == "Celtics"


def test_collegiate_sports_share_the_college_table(resolver: TeamResolver) -> None:
    assert resolver.tables.table_for(COLLEGE_FOOTBALL) is resolver.tables.college
    assert resolver.lookup(COLLEGE_FOOTBALL, 12) is None


def test_golf_has_no_team_table(resolver: TeamResolver) -> None:
    with pytest.raises(ProviderCapabilityError):
        resolver.teams_for(GOLF)


def test_table_hit_wins_over_raw_data(resolver: TeamResolver) -> None:
    team = resolver.lookup_or_create(BASEBALL, 108, {})
    assert team.name == "Angels"


def test_unknown_team_is_synthesized(resolver: TeamResolver) -> None:
    team = resolver.lookup_or_create(COLLEGE_FOOTBALL, 2000, _raw_team())

    assert team.id == 2000
    assert team.name == "North Carolina State"
    assert team.display_name == "N Carolina St"
    assert team.abbreviation == "NCST"
    assert team.primary_color == Color(204, 0, 0)
    assert team.secondary_color == WHITE
    # Synthesized teams are not written back.
    assert resolver.lookup(COLLEGE_FOOTBALL, 2000) is None


def test_synthesis_accepts_native_integer_ids(resolver: TeamResolver) -> None:
    team = resolver.lookup_or_create(COLLEGE_FOOTBALL, 2001, _raw_team(id=2001))
    assert team.id == 2001


def test_synthesis_reports_the_missing_field(resolver: TeamResolver) -> None:
    raw = _raw_team()
    del raw["abbreviation"]
    with pytest.raises(ParseError, match="abbreviation"):
        resolver.lookup_or_create(COLLEGE_FOOTBALL, 2000, raw)


def test_synthesis_wraps_bad_colors(resolver: TeamResolver) -> None:
    with pytest.raises(ParseError) as exc:
        resolver.lookup_or_create(COLLEGE_FOOTBALL, 2000, _raw_team(color="red"))
    assert exc.value.context is not None
    assert exc.value.context["field"] == "color"


def test_require_is_strict(resolver: TeamResolver) -> None:
    with pytest.raises(ParseError, match="Team 999 not present"):
        resolver.require(HOCKEY, 999)


def test_synthesis_rejects_signed_hex_colors(resolver: TeamResolver) -> None:
    with pytest.raises(ParseError, match="color"):
        resolver.lookup_or_create(COLLEGE_FOOTBALL, 2000, _raw_team(color="-1ffff"))
