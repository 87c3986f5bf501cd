"""Shared fixtures: in-memory database, event bus and entity builders."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Iterable, Optional, Sequence, Tuple

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.data.database import create_session_factory
from storefront.data.models import Base
from storefront.data.uow import create_uow
from storefront.domain.entities import Order, OrderItem, Product, Variation
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.value_objects import Money
from storefront.infrastructure.event_bus import InMemoryEventBus

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite://"


def build_item(
    product_id: str,
    quantity: int,
    price: str = "500",
    variation_id: Optional[str] = None,
    product_name: str = "BPC-157",
    variation_name: Optional[str] = None,
) -> OrderItem:
    unit = Money(Decimal(price))
    return OrderItem(
        product_id=product_id,
        product_name=product_name,
        quantity=quantity,
        price=unit,
        total=unit * quantity,
        variation_id=variation_id,
        variation_name=variation_name,
    )


def build_order(
    items: Sequence[OrderItem] = (),
    shipping_fee: Optional[str] = None,
    order_status: OrderStatus = OrderStatus.NEW,
    payment_status: PaymentStatus = PaymentStatus.PENDING,
    customer_name: str = "Maria Santos",
    customer_email: str = "maria@example.com",
    customer_phone: str = "+63 917 555 0101",
    created_at: Optional[datetime] = None,
    **kwargs,
) -> Order:
    total = Money.zero()
    for item in items:
        total = total + item.total
    now = created_at or datetime.now(timezone.utc)
    return Order(
        customer_name=customer_name,
        customer_email=customer_email,
        customer_phone=customer_phone,
        total_price=total,
        order_items=list(items),
        shipping_fee=Money(Decimal(shipping_fee)) if shipping_fee is not None else None,
        order_status=order_status,
        payment_status=payment_status,
        created_at=now,
        updated_at=now,
        **kwargs,
    )


def build_product(
    name: str = "BPC-157",
    price: str = "100",
    stock: int = 0,
    variations: Iterable[Tuple[str, str, int]] = (),
    category: str = "peptides",
    description: str = "",
    **kwargs,
) -> Product:
    """Product with (name, price, stock) variations."""
    return Product(
        name=name,
        base_price=Money(Decimal(price)),
        description=description,
        category=category,
        stock_quantity=stock,
        variations=[
            Variation(name=v_name, price=Money(Decimal(v_price)), stock_quantity=v_stock)
            for v_name, v_price, v_stock in variations
        ],
        **kwargs,
    )


@pytest.fixture
def make_item():
    return build_item


@pytest.fixture
def make_order():
    return build_order


@pytest.fixture
def make_product():
    return build_product


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create test session factory."""
    return create_session_factory(test_engine)


@pytest.fixture
def seed(session_factory):
    """Insert products, orders and site settings rows in one transaction."""

    async def _seed(
        products: Sequence[Product] = (),
        orders: Sequence[Order] = (),
        site_settings: Optional[dict] = None,
    ) -> None:
        async with create_uow(session_factory) as uow:
            for product in products:
                await uow.products.add(product)
            for order in orders:
                await uow.orders.add(order)
            if site_settings:
                await uow.site_settings.upsert_many(site_settings)
            await uow.commit()

    return _seed


@pytest.fixture
def read_stock(session_factory):
    async def _read(product_id: str, variation_id: Optional[str] = None) -> Optional[int]:
        async with create_uow(session_factory) as uow:
            return await uow.products.get_stock(product_id, variation_id)

    return _read


@pytest.fixture
def read_order(session_factory):
    async def _read(order_id: str) -> Optional[Order]:
        async with create_uow(session_factory) as uow:
            return await uow.orders.get(order_id)

    return _read