"""Application service for manual order workflow actions."""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Union

from sqlalchemy.ext.asyncio import async_sessionmaker

from storefront.data.uow import create_uow
from storefront.domain.entities import Order
from storefront.domain.enums import OrderStatus
from storefront.domain.errors import OrderNotFoundError
from storefront.domain.event_bus import EventBus
from storefront.domain.value_objects import DEFAULT_CURRENCY
from storefront.domain.workflow import available_actions, parse_status

logger = logging.getLogger(__name__)


class OrderStatusService:
    """
    Status changes without stock side effects.

    processing -> shipped -> delivered, and cancellation from
    new / confirmed / processing. Edges outside the workflow are rejected
    before anything is written.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        event_bus: EventBus,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._session_factory = session_factory
        self._event_bus = event_bus
        self._currency = currency

    async def update_order_status(self, order_id: str, new_status: Union[str, OrderStatus]) -> Order:
        """Write a new order status and stamp updated_at.

        Setting the status the order already has succeeds without change.

        Raises:
            InvalidOrderStatusError: If new_status is not a known status
            InvalidStatusTransitionError: If the workflow forbids the change
            OrderNotFoundError: If the order does not exist
            DataAccessError: If the store read or write fails
        """
        target = parse_status(new_status)

        async with create_uow(self._session_factory, self._currency) as uow:
            order = await uow.orders.get(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            previous = order.change_status(target, datetime.now(timezone.utc))
            if not await uow.orders.update_status(order):
                raise OrderNotFoundError(order_id)
            await uow.commit()

        logger.info(f"Order {order.short_reference} status: {previous.value} -> {target.value}")

        events = order.get_domain_events()
        order.clear_domain_events()
        await self._event_bus.publish_all(events)

        return order

    async def available_actions(self, order_id: str) -> List[Dict[str, str]]:
        """Workflow actions the console may offer for this order."""
        async with create_uow(self._session_factory, self._currency) as uow:
            order = await uow.orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return available_actions(order.order_status)
