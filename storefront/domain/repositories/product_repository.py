"""Repository interface for the product catalog and its stock fields."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for products and variations.

    Stock operations address a "stock target": the variation row when
    `variation_id` is given, otherwise the product row.
    """

    @abstractmethod
    async def add(self, product: Product) -> None:
        """Insert a product together with its variations."""

    @abstractmethod
    async def get(self, product_id: str) -> Optional[Product]:
        """Retrieve product (with variations) by identifier."""

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """Full catalog with variations, ordered by name."""

    @abstractmethod
    async def get_stock(self, product_id: str, variation_id: Optional[str] = None) -> Optional[int]:
        """Current stock of the target, or None when the row does not exist."""

    @abstractmethod
    async def decrement_stock(
        self,
        product_id: str,
        variation_id: Optional[str],
        quantity: int,
    ) -> Optional[int]:
        """Atomically subtract `quantity` only if current stock >= quantity.

        Returns:
            The new stock level, or None when the condition did not hold
            (or the row does not exist)
        """

    @abstractmethod
    async def set_stock(self, product_id: str, variation_id: Optional[str], new_stock: int) -> bool:
        """Overwrite the stock of the target.

        Returns:
            False when no row matched
        """
