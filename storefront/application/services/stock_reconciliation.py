"""
Stock reconciliation engine.

Moves an order from new to confirmed while deducting the stock of every line
item. No line item may take more units than are in stock at confirmation
time.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import async_sessionmaker

from storefront.data.uow import UnitOfWork, create_uow
from storefront.domain.entities import Order, OrderItem
from storefront.domain.enums import OrderStatus
from storefront.domain.errors import (
    InsufficientStockError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from storefront.domain.event_bus import EventBus
from storefront.domain.value_objects import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


class StockReconciliationService:
    """
    Order confirmation with stock deduction.

    Flow (single transaction):
    1. Pre-check every line item against current stock, no writes
    2. Conditionally decrement each stock target
    3. Mark the order confirmed / paid
    4. Commit, then publish OrderConfirmedEvent

    Any failure before the commit rolls back every deduction made so far.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        event_bus: EventBus,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize reconciliation service.

        Args:
            session_factory: SQLAlchemy async session factory
            event_bus: Bus receiving OrderConfirmedEvent after commit
            currency: Store currency code
        """
        self._session_factory = session_factory
        self._event_bus = event_bus
        self._currency = currency

    async def confirm_order(self, order_id: str) -> Order:
        """Confirm a new order and deduct its stock.

        Args:
            order_id: Order identifier

        Returns:
            The confirmed order

        Raises:
            OrderNotFoundError: If the order does not exist
            InvalidStatusTransitionError: If the order is not new
            InsufficientStockError: If any line item lacks stock
            DataAccessError: If a store read or write fails
        """
        async with create_uow(self._session_factory, self._currency) as uow:
            order = await uow.orders.get(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            if order.order_status != OrderStatus.NEW:
                raise InvalidStatusTransitionError(order.order_status.value, OrderStatus.CONFIRMED.value)

            logger.info(f"Confirming order {order.short_reference} ({len(order.order_items)} line items)")

            await self._check_stock(uow, order)
            await self._deduct_stock(uow, order)

            order.mark_confirmed(datetime.now(timezone.utc))
            if not await uow.orders.update_status(order):
                raise OrderNotFoundError(order_id)

            await uow.commit()

        logger.info(f"✅ Order {order.short_reference} confirmed, stock deducted")

        events = order.get_domain_events()
        order.clear_domain_events()
        await self._event_bus.publish_all(events)

        return order

    async def _check_stock(self, uow: UnitOfWork, order: Order) -> None:
        """Pre-check phase: abort before any write when an item lacks stock."""
        for item in order.order_items:
            available = await self._available(uow, item)
            if available < item.quantity:
                logger.warning(
                    f"Order {order.short_reference}: insufficient stock for {item.display_name} "
                    f"(available {available}, required {item.quantity})"
                )
                raise InsufficientStockError(item.display_name, available, item.quantity)

    async def _deduct_stock(self, uow: UnitOfWork, order: Order) -> None:
        """Apply phase: conditional decrement per item, rolled back on conflict."""
        for item in order.order_items:
            new_stock = await uow.products.decrement_stock(item.product_id, item.variation_id, item.quantity)
            if new_stock is None:
                # Stock moved between pre-check and write
                available = await self._available(uow, item)
                logger.warning(
                    f"Order {order.short_reference}: stock of {item.display_name} changed during "
                    f"confirmation (available {available}, required {item.quantity})"
                )
                raise InsufficientStockError(item.display_name, available, item.quantity)

            logger.info(f"Deducted {item.quantity} x {item.display_name}, {new_stock} left")

    @staticmethod
    async def _available(uow: UnitOfWork, item: OrderItem) -> int:
        stock = await uow.products.get_stock(item.product_id, item.variation_id)
        # A deleted product or variation has nothing to sell
        return stock if stock is not None else 0
