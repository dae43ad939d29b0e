# Vivarium settings - environment-driven configuration and feature flags.
# Created: 2026-09-14
#
# Flags are read once per process (see get_settings()); the feature registry
# is built from them at start-up and never re-reads the environment.

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureFlags(BaseModel):
    """Static on/off switches, one per feature in the catalog."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    todos: bool = False
    user_management: bool = True
    reptile_management: bool = True

    def is_on(self, name: str) -> bool:
        """Look up a flag by field name or by dashed feature name.

        Unknown names are off.
        """
        key = name.replace("-", "_")
        if key not in type(self).model_fields:
            return False
        return bool(getattr(self, key))


class Settings(BaseSettings):
    """Vivarium process settings.

    Every field can be overridden with a ``VIVARIUM_`` environment variable,
    e.g. ``VIVARIUM_API_BASE_URL`` or ``VIVARIUM_FEATURES__TODOS=true``.
    """

    model_config = SettingsConfigDict(
        env_prefix="VIVARIUM_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the remote record API.",
    )
    api_timeout: float = Field(default=15.0, gt=0)
    provider_timeout: float | None = Field(
        default=10.0,
        description="Seconds a dashboard provider may take; None waits forever.",
    )

    host: str = "127.0.0.1"
    port: int = 8890
    log_level: str = "INFO"

    features: FeatureFlags = Field(default_factory=FeatureFlags)

    @classmethod
    def load(cls) -> Settings:
        """Build a fresh instance from the current environment."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, resolved on first use."""
    return Settings.load()


def reset_settings() -> None:
    """Forget the cached settings (tests only)."""
    get_settings.cache_clear()
