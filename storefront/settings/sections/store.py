from __future__ import annotations

from pydantic import Field

from storefront.settings.base import StorefrontBaseSettings


class StoreSettings(StorefrontBaseSettings):
    """Store-wide business settings."""

    currency: str = Field("PHP", alias="STORE_CURRENCY", min_length=3, max_length=3)
    low_stock_threshold: int = Field(5, alias="LOW_STOCK_THRESHOLD", ge=1)
