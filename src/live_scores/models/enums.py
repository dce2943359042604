from __future__ import annotations

from enum import Enum, StrEnum


class SportType(StrEnum):
    HOCKEY = "hockey"
    BASEBALL = "baseball"
    GOLF = "golf"
    BASKETBALL = "basketball"
    FOOTBALL = "football"


class Level(StrEnum):
    PROFESSIONAL = "professional"
    COLLEGIATE = "collegiate"


class Status(str, Enum):
    PREGAME = "PREGAME"
    ACTIVE = "ACTIVE"
    INTERMISSION = "INTERMISSION"
    END = "END"
    # Never stored on a Game: marks an upstream event that must be dropped.
    INVALID = "INVALID"


class Possession(str, Enum):
    HOME = "HOME"
    AWAY = "AWAY"
    NONE = "NONE"


class ProviderEnum(StrEnum):
    ESPN = "espn"
    NHL = "nhl"
