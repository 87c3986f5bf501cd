"""Stock level filter values used by the inventory list."""
from enum import Enum


class StockFilter(str, Enum):
    """Stock filter values."""

    ALL = "all"
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"
