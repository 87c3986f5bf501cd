"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import Iterable, List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Order
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.errors import DataAccessError
from storefront.domain.repositories import OrderRepository
from storefront.domain.value_objects import DEFAULT_CURRENCY

from ..errors import data_access
from ..mappers import OrderMapper
from ..models import OrderModel

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            currency: Store currency attached to every loaded amount
        """
        self._session = session
        self._currency = currency

    async def add(self, order: Order) -> None:
        async with data_access("insert order"):
            self._session.add(OrderMapper.to_persistence(order))
            await self._session.flush()

    async def get(self, order_id: str) -> Optional[Order]:
        async with data_access("read order"):
            result = await self._session.execute(
                select(OrderModel).where(OrderModel.id == order_id)
            )
            model = result.scalar_one_or_none()

        if model is None:
            return None
        return self._load(model)

    async def list_all(self) -> List[Order]:
        async with data_access("list orders"):
            result = await self._session.execute(
                select(OrderModel).order_by(OrderModel.created_at.desc())
            )
            models = result.scalars().all()

        return self._load_many(models)

    async def list_by_status(
        self,
        statuses: Iterable[OrderStatus],
        payment_status: Optional[PaymentStatus] = None,
    ) -> List[Order]:
        stmt = select(OrderModel).where(
            OrderModel.order_status.in_([status.value for status in statuses])
        )
        if payment_status is not None:
            stmt = stmt.where(OrderModel.payment_status == payment_status.value)

        async with data_access("list orders by status"):
            result = await self._session.execute(stmt.order_by(OrderModel.created_at.desc()))
            models = result.scalars().all()

        return self._load_many(models)

    async def update_status(self, order: Order) -> bool:
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .values(
                order_status=order.order_status.value,
                payment_status=order.payment_status.value,
                updated_at=order.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        async with data_access("update order status"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0

    def _load(self, model: OrderModel) -> Order:
        """Map one row; values outside the known enums make the row unreadable."""
        try:
            return OrderMapper.to_domain(model, self._currency)
        except ValueError as exc:
            raise DataAccessError(f"read order {model.id}", exc) from exc

    def _load_many(self, models: Sequence[OrderModel]) -> List[Order]:
        orders = []
        for model in models:
            try:
                orders.append(self._load(model))
            except DataAccessError as exc:
                logger.error(f"Skipping unreadable order row: {exc}")
        return orders
