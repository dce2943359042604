from __future__ import annotations

from dataclasses import dataclass

from live_scores.models.enums import Level, SportType


class InvalidSportType(ValueError):
    """Raised when a sport token is not one of the canonical tokens."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid sport type: {token!r}")
        self.token = token


@dataclass(frozen=True)
class Sport:
    """A sport family crossed with its competition level. Used as the cache key."""

    sport_type: SportType
    level: Level = Level.PROFESSIONAL

    def __str__(self) -> str:
        # Non-canonical combinations (collegiate hockey, ...) have no token.
        return _TOKENS.get(self, f"{self.level}-{self.sport_type}")

    @classmethod
    def parse(cls, token: str) -> Sport:
        try:
            return _BY_TOKEN[token]
        except KeyError:
            raise InvalidSportType(token) from None

    @property
    def is_collegiate(self) -> bool:
        return self.level == Level.COLLEGIATE


HOCKEY = Sport(SportType.HOCKEY)
BASEBALL = Sport(SportType.BASEBALL)
GOLF = Sport(SportType.GOLF)
BASKETBALL = Sport(SportType.BASKETBALL)
COLLEGE_BASKETBALL = Sport(SportType.BASKETBALL, Level.COLLEGIATE)
FOOTBALL = Sport(SportType.FOOTBALL)
COLLEGE_FOOTBALL = Sport(SportType.FOOTBALL, Level.COLLEGIATE)

_TOKENS: dict[Sport, str] = {
    HOCKEY: "hockey",
    BASEBALL: "baseball",
    GOLF: "golf",
    BASKETBALL: "basketball",
    COLLEGE_BASKETBALL: "college-basketball",
    FOOTBALL: "football",
    COLLEGE_FOOTBALL: "college-football",
}
_BY_TOKEN: dict[str, Sport] = {token: sport for sport, token in _TOKENS.items()}

ALL_SPORTS: tuple[Sport, ...] = tuple(_TOKENS)
