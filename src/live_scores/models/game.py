from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from live_scores.core.color import Color
from live_scores.models.enums import Possession, SportType, Status
from live_scores.models.sport import Sport


@dataclass(frozen=True)
class Team:
    """Team identity. `id` is provider-scoped, not unique across sports."""

    id: int
    location: str
    name: str
    display_name: str
    abbreviation: str
    primary_color: Color
    secondary_color: Color


@dataclass(frozen=True)
class HockeyData:
    away_powerplay: bool
    home_powerplay: bool
    away_players: int
    home_players: int


@dataclass(frozen=True)
class BaseballData:
    balls: int = 0
    outs: int = 0
    strikes: int = 0
    is_inning_top: bool = False
    on_first: bool = False
    on_second: bool = False
    on_third: bool = False


@dataclass(frozen=True)
class BasketballData:
    pass


@dataclass(frozen=True)
class FootballData:
    time_remaining: str = ""
    ball_position: str = ""
    down_string: str = ""
    possession: Possession = Possession.NONE


@dataclass(frozen=True)
class GolfPlayer:
    name: str
    display_name: str
    score: str
    position: int


@dataclass(frozen=True)
class GolfData:
    event_name: str
    # Ascending by position, at most five entries.
    players: tuple[GolfPlayer, ...] = ()


ExtraGameData = HockeyData | BaseballData | BasketballData | FootballData | GolfData

_EXTRA_BY_SPORT: dict[SportType, type] = {
    SportType.HOCKEY: HockeyData,
    SportType.BASEBALL: BaseballData,
    SportType.BASKETBALL: BasketballData,
    SportType.FOOTBALL: FootballData,
    SportType.GOLF: GolfData,
}


@dataclass(frozen=True)
class Game:
    """A normalized snapshot of one game / event."""

    game_id: int
    sport: Sport
    status: Status
    start_time: datetime
    home_team: Team | None = None
    away_team: Team | None = None
    home_score: int = 0
    away_score: int = 0
    period: int = 0
    ordinal: str = ""
    extra: ExtraGameData | None = None

    def __post_init__(self) -> None:
        if self.status == Status.INVALID:
            raise ValueError(f"Game {self.game_id} cannot carry status INVALID")

        if (self.home_team is None) != (self.away_team is None):
            raise ValueError(f"Game {self.game_id} must have both teams or neither")

        if self.sport.sport_type == SportType.GOLF and self.home_team is not None:
            raise ValueError(f"Golf event {self.game_id} cannot have teams")

        expected = _EXTRA_BY_SPORT[self.sport.sport_type]
        if self.extra is not None and not isinstance(self.extra, expected):
            raise ValueError(
                f"Game {self.game_id} ({self.sport}) cannot carry {type(self.extra).__name__}"
            )
