"""
Centralised settings loader.

Values come from the environment (or a local `.env`), validated by
pydantic-settings and cached for the lifetime of the process.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local", alias="ENV_NAME")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # ─── calculator / API behaviour ──────────────────────────────────
    # unit system assumed when a request or the form omits one
    default_unit_system: Literal["metric", "imperial"] = Field(
        "metric", alias="DEFAULT_UNIT_SYSTEM"
    )
    cors_origins: list[str] = Field(["*"], alias="CORS_ORIGINS")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
