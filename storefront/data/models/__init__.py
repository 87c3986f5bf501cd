"""Database models."""

from .base import Base
from .order_model import OrderModel
from .product_model import ProductModel, ProductVariationModel
from .site_setting_model import SiteSettingModel

__all__ = [
    "Base",
    "OrderModel",
    "ProductModel",
    "ProductVariationModel",
    "SiteSettingModel",
]
