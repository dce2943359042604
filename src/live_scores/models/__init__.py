from live_scores.models.enums import Level, Possession, ProviderEnum, SportType, Status
from live_scores.models.game import (
    BaseballData,
    BasketballData,
    ExtraGameData,
    FootballData,
    Game,
    GolfData,
    GolfPlayer,
    HockeyData,
    Team,
)
from live_scores.models.sport import ALL_SPORTS, InvalidSportType, Sport

__all__ = [
    "ALL_SPORTS",
    "BaseballData",
    "BasketballData",
    "ExtraGameData",
    "FootballData",
    "Game",
    "GolfData",
    "GolfPlayer",
    "HockeyData",
    "InvalidSportType",
    "Level",
    "Possession",
    "ProviderEnum",
    "Sport",
    "SportType",
    "Status",
    "Team",
]
