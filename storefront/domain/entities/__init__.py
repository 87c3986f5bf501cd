"""Domain entities."""
from .order import Order, OrderItem
from .product import LOW_STOCK_THRESHOLD, Product, Variation

__all__ = [
    "LOW_STOCK_THRESHOLD",
    "Order",
    "OrderItem",
    "Product",
    "Variation",
]
