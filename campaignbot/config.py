from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from campaignbot.logging_setup import resolve_level


def _parse_targets(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [p.strip() for p in str(value).split(",") if p.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Coordinator identity
    FIRST_NAME: str = Field(default="Lex")
    LAST_NAME: str = Field(default="Luthor")
    # Opaque, passed straight to the encoder
    SHARED_KEY: str = Field(default="")

    # Assistant
    ASSISTANT_ENABLED: bool = Field(default=True)
    ASSISTANT_CONSENTS: bool = Field(default=True)
    # Ordered; the first entry is where the helper builds
    TARGETS: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # Seconds the planning step takes
    PLAN_DELAY_S: float = Field(default=0.1, ge=0)

    LOG_JSON: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("TARGETS", mode="before")
    @classmethod
    def _validate_targets(cls, v):  # type: ignore[override]
        return _parse_targets(v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _validate_log_level(cls, v):  # type: ignore[override]
        name = str(v).upper()
        resolve_level(name)
        return name


def load_settings() -> Settings:
    return Settings()
