# Settings sections
from .database import DatabaseSettings
from .logging import LoggingSettings
from .store import StoreSettings

__all__ = [
    "DatabaseSettings",
    "LoggingSettings",
    "StoreSettings",
]
