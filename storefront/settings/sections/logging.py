from __future__ import annotations

from pydantic import Field

from storefront.settings.base import StorefrontBaseSettings


class LoggingSettings(StorefrontBaseSettings):
    level: str = Field("INFO", alias="LOG_LEVEL")
    format: str = Field(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        alias="LOG_FORMAT",
    )
