"""SQLAlchemy repository implementations."""
from .order_repository_impl import SqlAlchemyOrderRepository
from .product_repository_impl import SqlAlchemyProductRepository
from .site_settings_repository_impl import SqlAlchemySiteSettingsRepository

__all__ = [
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemySiteSettingsRepository",
]
