"""
Product catalog entities.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from typing import List, Optional
import uuid

from ..value_objects import Money

# Stock strictly between 0 and this value is "low stock"
LOW_STOCK_THRESHOLD = 5


@dataclass
class Variation:
    """Purchasable sub-unit of a product (dosage/size) with its own price and stock."""
    name: str
    price: Money
    stock_quantity: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    product_id: Optional[str] = None

    @property
    def stock_value(self) -> Money:
        return self.price * self.stock_quantity


@dataclass
class Product:
    """
    Catalog product.

    When variations exist, stock and pricing live on the variations and the
    product-level stock_quantity / price are ignored for value calculations.
    """
    name: str
    base_price: Money
    description: str = ""
    category: str = ""
    discount_price: Optional[Money] = None
    discount_active: bool = False
    stock_quantity: int = 0
    variations: List[Variation] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def has_variations(self) -> bool:
        return bool(self.variations)

    @property
    def effective_price(self) -> Money:
        """Discount price when a discount is active and set, else base price."""
        if self.discount_active and self.discount_price is not None and not self.discount_price.is_zero():
            return self.discount_price
        return self.base_price

    def stock_levels(self) -> List[int]:
        """Stock levels that matter for this product (per variation, or its own)."""
        if self.has_variations:
            return [v.stock_quantity for v in self.variations]
        return [self.stock_quantity]

    def stock_value(self) -> Money:
        if self.has_variations:
            total = Money.zero(self.base_price.currency)
            for variation in self.variations:
                total = total + variation.stock_value
            return total
        return self.effective_price * self.stock_quantity

    def is_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        return any(0 < level < threshold for level in self.stock_levels())

    def is_in_stock(self) -> bool:
        return any(level > 0 for level in self.stock_levels())

    def is_out_of_stock(self) -> bool:
        return all(level == 0 for level in self.stock_levels())
