"""Application services."""
from .inventory_service import InventoryService
from .order_service import OrderQueryService
from .order_status_service import OrderStatusService
from .site_settings_service import DEFAULT_SITE_SETTINGS, SiteSettingsService
from .stock_reconciliation import StockReconciliationService

__all__ = [
    "DEFAULT_SITE_SETTINGS",
    "InventoryService",
    "OrderQueryService",
    "OrderStatusService",
    "SiteSettingsService",
    "StockReconciliationService",
]
