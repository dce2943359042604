from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LIVE_SCORES_",
    )

    # espn (scoreboards + golf leaderboard)
    espn_base_url: str = "http://site.api.espn.com/apis/site/v2/sports"

    # nhl stats api (schedule + linescore)
    nhl_base_url: str = "http://statsapi.web.nhl.com/api/v1"

    # http
    http_timeout_s: float = Field(default=10.0, gt=0)
    http_connect_timeout_s: float = Field(default=5.0, gt=0)

    log_level: str = "INFO"


settings = Settings()
