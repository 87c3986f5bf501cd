"""Application service for storefront site settings."""

import logging
from typing import Dict

from sqlalchemy.ext.asyncio import async_sessionmaker

from storefront.data.uow import create_uow
from storefront.domain.errors import SettingNotFoundError

logger = logging.getLogger(__name__)


# Used for any key missing from the site_settings table
DEFAULT_SITE_SETTINGS: Dict[str, str] = {
    "site_name": "Glowform Lab",
    "site_logo": "/assets/logo.jpg",
    "site_description": "Where science meets sparkle — wellness designed to help you glow with confidence.",
    "currency": "PHP",
    "currency_code": "PHP",
    "hero_badge_text": "Magical Wellness Science ✨",
    "hero_title_prefix": "The New Improved",
    "hero_title_highlight": "You",
    "hero_title_suffix": "Designed for Your Glow-Up Era",
    "hero_subtext": "Where science meets sparkle — magical wellness designed to help you glow.",
    "hero_tagline": "Science-backed products. Trusted by our glow community.",
    "hero_description": (
        "Where science meets sparkle — wellness designed to help you glow with confidence. "
        "Premium peptides and wellness solutions crafted for your transformation journey."
    ),
    "hero_accent_color": "gold-500",
}


class SiteSettingsService:

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_site_settings(self) -> Dict[str, str]:
        """Stored values overlaid on the defaults; blank stored values keep the default."""
        async with create_uow(self._session_factory) as uow:
            stored = await uow.site_settings.get_all()

        settings = dict(DEFAULT_SITE_SETTINGS)
        settings.update({key: value for key, value in stored.items() if value})
        return settings

    async def update_site_setting(self, key: str, value: str) -> Dict[str, str]:
        """Update one stored setting and return the refreshed settings.

        Raises:
            SettingNotFoundError: If the key has no stored row
        """
        async with create_uow(self._session_factory) as uow:
            if not await uow.site_settings.update(key, value):
                raise SettingNotFoundError(key)
            await uow.commit()

        logger.info(f"Site setting updated: {key}")
        return await self.get_site_settings()

    async def update_site_settings(self, updates: Dict[str, object]) -> Dict[str, str]:
        """Upsert several settings; values are stored as strings."""
        values = {key: str(value) for key, value in updates.items()}
        async with create_uow(self._session_factory) as uow:
            await uow.site_settings.upsert_many(values)
            await uow.commit()

        logger.info(f"Site settings upserted: {', '.join(sorted(values))}")
        return await self.get_site_settings()
