"""Domain enums."""

from .order_status import (
    ALL_STATUSES,
    REVENUE_STATUSES,
    OrderStatus,
    PaymentStatus,
)
from .stock_filter import StockFilter

__all__ = [
    "ALL_STATUSES",
    "REVENUE_STATUSES",
    "OrderStatus",
    "PaymentStatus",
    "StockFilter",
]
