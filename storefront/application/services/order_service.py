"""Application service for reading orders."""

import logging
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker

from storefront.data.uow import create_uow
from storefront.domain.entities import Order
from storefront.domain.enums import REVENUE_STATUSES, PaymentStatus
from storefront.domain.errors import OrderNotFoundError
from storefront.domain.value_objects import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


class OrderQueryService:
    """
    Application service for order reads.

    Responsibilities:
    - Fetch order lists for the orders board
    - Fetch single orders for the detail view
    - Fetch recognised-revenue orders for sales aggregation
    """

    def __init__(self, session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize order query service.

        Args:
            session_factory: SQLAlchemy async session factory
            currency: Store currency code
        """
        self._session_factory = session_factory
        self._currency = currency

    async def list_orders(self) -> List[Order]:
        """All orders, newest first.

        Raises:
            DataAccessError: If the store cannot be read
        """
        async with create_uow(self._session_factory, self._currency) as uow:
            orders = await uow.orders.list_all()
        logger.debug(f"Loaded {len(orders)} orders")
        return orders

    async def get_order(self, order_id: str) -> Order:
        """Order by id.

        Raises:
            OrderNotFoundError: If no order has this id
            DataAccessError: If the store cannot be read
        """
        async with create_uow(self._session_factory, self._currency) as uow:
            order = await uow.orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def list_revenue_orders(self) -> List[Order]:
        """Paid orders that progressed past creation."""
        async with create_uow(self._session_factory, self._currency) as uow:
            return await uow.orders.list_by_status(REVENUE_STATUSES, PaymentStatus.PAID)

    async def place_order(self, order: Order) -> Order:
        """Insert an order as checkout would (new / pending)."""
        async with create_uow(self._session_factory, self._currency) as uow:
            await uow.orders.add(order)
            await uow.commit()
        logger.info(f"Order placed: {order.short_reference} ({len(order.order_items)} items)")
        return order
