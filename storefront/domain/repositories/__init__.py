"""Repository interfaces."""
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .site_settings_repository import SiteSettingsRepository

__all__ = [
    "OrderRepository",
    "ProductRepository",
    "SiteSettingsRepository",
]
