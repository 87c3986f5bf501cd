"""Concurrent confirmations against a file-backed SQLite store."""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from storefront.application.services import StockReconciliationService
from storefront.data.database import close_database, create_engine, create_session_factory, init_database
from storefront.data.uow import create_uow
from storefront.domain.enums import OrderStatus
from storefront.domain.errors import InsufficientStockError
from storefront.domain.events import OrderConfirmedEvent
from storefront.settings import DatabaseSettings


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    settings = DatabaseSettings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    engine = create_engine(settings)
    await init_database(engine)
    yield create_session_factory(engine)
    await close_database(engine)


def test_only_in_memory_sqlite_shares_one_connection(tmp_path):
    memory = create_engine(DatabaseSettings(DATABASE_URL="sqlite+aiosqlite://"))
    file_backed = create_engine(DatabaseSettings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"))

    assert isinstance(memory.pool, StaticPool)
    assert not isinstance(file_backed.pool, StaticPool)


@pytest.mark.asyncio
async def test_refused_confirmation_does_not_undo_a_concurrent_one(
    file_session_factory, event_bus, make_product, make_order, make_item
):
    tb500 = make_product(name="TB-500", stock=10)
    ghk = make_product(name="GHK-Cu", stock=5)
    scarce = make_product(name="Semax", stock=1)
    accepted = make_order([make_item(tb500.id, 3, product_name="TB-500")])
    refused = make_order([
        make_item(ghk.id, 1, product_name="GHK-Cu"),
        make_item(scarce.id, 5, product_name="Semax"),
    ])
    async with create_uow(file_session_factory) as uow:
        for product in (tb500, ghk, scarce):
            await uow.products.add(product)
        await uow.orders.add(accepted)
        await uow.orders.add(refused)
        await uow.commit()

    confirmed = []
    event_bus.subscribe(OrderConfirmedEvent, lambda event: confirmed.append(event.order_id))
    service = StockReconciliationService(file_session_factory, event_bus)

    results = await asyncio.gather(
        service.confirm_order(accepted.id),
        service.confirm_order(refused.id),
        return_exceptions=True,
    )

    assert results[0].order_status == OrderStatus.CONFIRMED
    assert isinstance(results[1], InsufficientStockError)
    assert confirmed == [accepted.id]

    async with create_uow(file_session_factory) as uow:
        assert (await uow.orders.get(accepted.id)).order_status == OrderStatus.CONFIRMED
        assert (await uow.orders.get(refused.id)).order_status == OrderStatus.NEW
        assert await uow.products.get_stock(tb500.id) == 7
        assert await uow.products.get_stock(ghk.id) == 5
        assert await uow.products.get_stock(scarce.id) == 1
