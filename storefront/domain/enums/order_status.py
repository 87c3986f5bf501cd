"""
Order Status Enums.

Status values for the order lifecycle and payment tracking.
"""
from enum import Enum
from typing import FrozenSet


class OrderStatus(str, Enum):
    """Order lifecycle status values."""

    NEW = "new"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """Payment status values."""

    PENDING = "pending"
    PAID = "paid"


# Orders that count towards sales figures (together with payment_status=paid)
REVENUE_STATUSES: FrozenSet[OrderStatus] = frozenset([
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
])


# Pseudo status used by list filters and dashboard tallies
ALL_STATUSES = "all"
