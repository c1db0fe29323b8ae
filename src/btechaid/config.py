"""Lightweight configuration for the roster aid."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from btechaid.domain.rules_config import RulesConfig, StorageRules, UnitRules


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BTECHAID_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Level passed to logging.basicConfig")
    announce_load: bool = Field(
        default=True, description="Log a message once the model has been loaded"
    )
    default_bay_capacity: int = Field(
        default=2, description="Slots of a mech bay created without an explicit capacity", gt=0
    )
    default_mech_tonnage: int = Field(
        default=20, description="Tonnage of a mech created without an explicit tonnage", gt=0
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def rules_from_settings(settings: Settings) -> RulesConfig:
    """Build a rule configuration reflecting the configured defaults."""

    return RulesConfig(
        units=UnitRules(default_mech_tonnage=settings.default_mech_tonnage),
        storage=StorageRules(default_bay_capacity=settings.default_bay_capacity),
    )
