from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OAuthSettings(BaseModel):
    # Google OAuth client
    client_id: str = ""
    client_secret: str = ""
    redirect_url: str = ""

    # Applied to every provider call by the default transport
    timeout: float = Field(default=2.0, gt=0)


class LoggingSettings(BaseModel):
    as_json: bool = False
    level: Literal["critical", "error", "warning", "info", "debug"] = "info"


class Settings(BaseSettings):
    """Settings loaded from environment (and .env)."""

    oauth: OAuthSettings = OAuthSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_prefix="OAUTH_HELPER_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
