from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from storefront.settings.sections import DatabaseSettings, LoggingSettings, StoreSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    database: DatabaseSettings
    store: StoreSettings
    logging: LoggingSettings


def load_app_settings() -> AppSettings:
    """Build settings from the current environment (uncached)."""
    return AppSettings(
        database=DatabaseSettings(),
        store=StoreSettings(),
        logging=LoggingSettings(),
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return load_app_settings()
