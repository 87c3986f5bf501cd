"""Domain events for the event bus."""
from .base import DomainEvent
from .order_events import (
    OrderConfirmedEvent,
    OrderStatusChangedEvent,
    StockUpdatedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderConfirmedEvent",
    "OrderStatusChangedEvent",
    "StockUpdatedEvent",
]
