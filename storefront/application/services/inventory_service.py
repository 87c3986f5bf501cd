"""Application service for the inventory screen."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from storefront.application.inventory_stats import InventoryStats, compute_inventory_stats
from storefront.data.uow import create_uow
from storefront.domain.entities import LOW_STOCK_THRESHOLD, Product
from storefront.domain.enums import REVENUE_STATUSES, PaymentStatus
from storefront.domain.errors import ProductNotFoundError
from storefront.domain.event_bus import EventBus
from storefront.domain.events import StockUpdatedEvent
from storefront.domain.value_objects import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Catalog reads, stock edits and sales aggregation.

    Responsibilities:
    - Load the product catalog with variations
    - Compute InventoryStats from fresh catalog and revenue orders
    - Overwrite a single stock field from the stock editor
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        event_bus: EventBus,
        currency: str = DEFAULT_CURRENCY,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        self._session_factory = session_factory
        self._event_bus = event_bus
        self._currency = currency
        self._low_stock_threshold = low_stock_threshold

    @property
    def low_stock_threshold(self) -> int:
        return self._low_stock_threshold

    @property
    def currency(self) -> str:
        return self._currency

    async def list_products(self) -> List[Product]:
        async with create_uow(self._session_factory, self._currency) as uow:
            return await uow.products.list_all()

    async def add_product(self, product: Product) -> Product:
        """Insert a catalog product with its variations."""
        async with create_uow(self._session_factory, self._currency) as uow:
            await uow.products.add(product)
            await uow.commit()
        logger.info(f"Product added: {product.name} ({len(product.variations)} variations)")
        return product

    async def get_stats(self) -> InventoryStats:
        """Recompute all dashboard figures from the current store contents."""
        async with create_uow(self._session_factory, self._currency) as uow:
            products = await uow.products.list_all()
            orders = await uow.orders.list_by_status(REVENUE_STATUSES, PaymentStatus.PAID)

        return compute_inventory_stats(
            products,
            orders,
            low_stock_threshold=self._low_stock_threshold,
            currency=self._currency,
        )

    async def update_stock(self, product_id: str, variation_id: Optional[str], new_stock: int) -> None:
        """Overwrite the stock of a variation (when given) or of the product.

        The value is written as given; callers clamp or validate it.

        Raises:
            ProductNotFoundError: If the target row does not exist
            DataAccessError: If the write fails
        """
        async with create_uow(self._session_factory, self._currency) as uow:
            if not await uow.products.set_stock(product_id, variation_id, new_stock):
                raise ProductNotFoundError(product_id, variation_id)
            await uow.commit()

        target = f"variation {variation_id}" if variation_id else f"product {product_id}"
        logger.info(f"✅ Stock of {target} set to {new_stock}")

        await self._event_bus.publish(
            StockUpdatedEvent(product_id=product_id, variation_id=variation_id, new_stock=new_stock)
        )
