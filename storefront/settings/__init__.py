# Settings package
from storefront.settings.app import AppSettings, get_app_settings, load_app_settings
from storefront.settings.sections import DatabaseSettings, LoggingSettings, StoreSettings

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "StoreSettings",
    "get_app_settings",
    "load_app_settings",
]
