# settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from services.listen_config import DEFAULT_HOST, ListenConfig
from services.port_resolver import DEFAULT_PORT, port_spec


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -----------------------
    # Runtime
    # -----------------------
    ENV: Literal["dev", "staging", "prod"] = "dev"
    LOG_LEVEL: str = "INFO"

    # -----------------------
    # Listen address
    # -----------------------
    HOST: str = Field(default=DEFAULT_HOST)
    # unset -> DEFAULT_PORT, 0 -> ephemeral
    PORT: Optional[int] = Field(default=None)
    DEFAULT_PORT: int = Field(default=DEFAULT_PORT)

    @field_validator("PORT", mode="before")
    @classmethod
    def _blank_port_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def listen_config_from_settings(s: Settings | None = None) -> ListenConfig:
    if s is None:
        s = get_settings()
    return ListenConfig(
        host=(s.HOST or DEFAULT_HOST).strip(),
        port=port_spec(s.PORT),
        default_port=s.DEFAULT_PORT,
    )


def validate_env_settings(s: Settings | None = None) -> None:
    """
    Fail-fast validation of the listen settings.

    Rules:
      - PORT must not be negative
      - DEFAULT_PORT must be positive
      - prod: PORT must be set to an explicit, non-zero port
    """
    if s is None:
        s = get_settings()
    problems: list[str] = []

    if s.PORT is not None and s.PORT < 0:
        problems.append("PORT cannot be negative")
    if s.DEFAULT_PORT <= 0:
        problems.append("DEFAULT_PORT must be positive")

    if s.ENV == "prod":
        if s.PORT is None:
            problems.append("PORT is required in prod")
        elif s.PORT == 0:
            problems.append("PORT=0 (ephemeral) is not allowed in prod")

    if problems:
        raise RuntimeError(
            f"Listen settings validation failed (ENV={s.ENV}): " + "; ".join(problems)
        )
