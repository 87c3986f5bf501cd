"""Repository interface for key/value site settings."""

from abc import ABC, abstractmethod
from typing import Dict


class SiteSettingsRepository(ABC):

    @abstractmethod
    async def get_all(self) -> Dict[str, str]:
        """All stored settings as a key -> value mapping."""

    @abstractmethod
    async def update(self, key: str, value: str) -> bool:
        """Update one existing setting. Returns False when the key is unknown."""

    @abstractmethod
    async def upsert_many(self, values: Dict[str, str]) -> None:
        """Insert or update several settings at once."""
