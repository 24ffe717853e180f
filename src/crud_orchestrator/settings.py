"""
crud_orchestrator.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the orchestration layer.
- Offer a cached settings instance for composition roots.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `CRUD_`).
    Defaults are safe for local development and tests.
    """

    model_config = SettingsConfigDict(env_prefix="CRUD_", case_sensitive=False)

    # `dev` renders logs for humans; `test`/`prod` emit JSON.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = Field(default="crud-orchestrator", min_length=1)
    log_level: str = Field(
        default="INFO", pattern=r"(?i)^(debug|info|warning|error|critical)$"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for every service that gets wired up.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Persistence settings (database URLs, pools) belong to the data-access ports, not here.
