"""
Order and inventory domain events.

Published on the event bus after the corresponding write has been committed.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderConfirmedEvent(DomainEvent):
    """
    Order was confirmed and its stock deducted.

    Consumers: inventory dashboard (refetch sales), orders board (refetch list)
    """

    aggregate_type = "Order"
    aggregate_key = "order_id"

    order_id: str = ""
    total_quantity: int = 0
    final_total: Decimal = Decimal("0")


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """Order status changed through a manual workflow action."""

    aggregate_type = "Order"
    aggregate_key = "order_id"

    order_id: str = ""
    previous_status: str = ""
    new_status: str = ""


@dataclass
class StockUpdatedEvent(DomainEvent):
    """Stock level was edited manually from the inventory screen."""

    aggregate_type = "Product"
    aggregate_key = "product_id"

    product_id: str = ""
    variation_id: Optional[str] = None
    new_stock: int = 0
