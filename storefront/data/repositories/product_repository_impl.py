"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.domain.entities import Product
from storefront.domain.repositories import ProductRepository
from storefront.domain.value_objects import DEFAULT_CURRENCY

from ..errors import data_access
from ..mappers import ProductMapper
from ..models import ProductModel, ProductVariationModel

logger = logging.getLogger(__name__)


def _stock_target(product_id: str, variation_id: Optional[str]):
    """Model class and row id holding the stock for a line item."""
    if variation_id:
        return ProductVariationModel, variation_id
    return ProductModel, product_id


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, currency: str = DEFAULT_CURRENCY) -> None:
        self._session = session
        self._currency = currency

    async def add(self, product: Product) -> None:
        async with data_access("insert product"):
            self._session.add(ProductMapper.to_persistence(product))
            await self._session.flush()

    async def get(self, product_id: str) -> Optional[Product]:
        async with data_access("read product"):
            result = await self._session.execute(
                select(ProductModel)
                .options(selectinload(ProductModel.variations))
                .where(ProductModel.id == product_id)
            )
            model = result.scalar_one_or_none()

        if model is None:
            return None
        return ProductMapper.to_domain(model, self._currency)

    async def list_all(self) -> List[Product]:
        async with data_access("list products"):
            result = await self._session.execute(
                select(ProductModel)
                .options(selectinload(ProductModel.variations))
                .order_by(ProductModel.name)
            )
            models = result.scalars().all()

        return [ProductMapper.to_domain(model, self._currency) for model in models]

    async def get_stock(self, product_id: str, variation_id: Optional[str] = None) -> Optional[int]:
        model, row_id = _stock_target(product_id, variation_id)
        async with data_access("read stock"):
            result = await self._session.execute(
                select(model.stock_quantity).where(model.id == row_id)
            )
            return result.scalar_one_or_none()

    async def decrement_stock(
        self,
        product_id: str,
        variation_id: Optional[str],
        quantity: int,
    ) -> Optional[int]:
        """Single conditional UPDATE; concurrent confirmations can't oversell."""
        model, row_id = _stock_target(product_id, variation_id)
        stmt = (
            update(model)
            .where(model.id == row_id, model.stock_quantity >= quantity)
            .values(stock_quantity=model.stock_quantity - quantity)
            .returning(model.stock_quantity)
            .execution_options(synchronize_session=False)
        )
        async with data_access("decrement stock"):
            result = await self._session.execute(stmt)
            new_stock = result.scalar_one_or_none()

        if new_stock is not None:
            logger.debug(f"Stock of {model.__tablename__}:{row_id} decremented by {quantity} -> {new_stock}")
        return new_stock

    async def set_stock(self, product_id: str, variation_id: Optional[str], new_stock: int) -> bool:
        model, row_id = _stock_target(product_id, variation_id)
        stmt = (
            update(model)
            .where(model.id == row_id)
            .values(stock_quantity=new_stock)
            .execution_options(synchronize_session=False)
        )
        async with data_access("update stock"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0
