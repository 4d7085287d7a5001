"""Application settings, loaded from ``UPVOTE_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from upvote.application.order_history import PageResetPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UPVOTE_",
        env_file=".env",
        extra="ignore",
    )

    # Dashboard API; when unset the JSON snapshot in data_dir is used.
    api_base_url: str | None = None
    api_token: str | None = None
    request_timeout: float = Field(default=10.0, gt=0)

    data_dir: Path = Path("data")

    page_size: int = Field(default=10, gt=0)
    page_reset_policy: PageResetPolicy = PageResetPolicy.KEEP

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
