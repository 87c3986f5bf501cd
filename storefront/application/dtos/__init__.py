"""Application DTOs."""

from .inventory_dto import (
    InventoryLineDTO,
    InventoryStatsDTO,
    ProductStockDTO,
    StockUpdateRequest,
    product_to_dto,
    stats_to_dto,
)
from .order_dto import (
    OrderActionDTO,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    UpdateOrderStatusRequest,
    order_to_dto,
)
from .settings_dto import SiteSettingUpdateRequest

__all__ = [
    "InventoryLineDTO",
    "InventoryStatsDTO",
    "OrderActionDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "ProductStockDTO",
    "SiteSettingUpdateRequest",
    "StockUpdateRequest",
    "UpdateOrderStatusRequest",
    "order_to_dto",
    "product_to_dto",
    "stats_to_dto",
]
