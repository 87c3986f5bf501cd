"""Tests for order confirmation with stock deduction."""

from decimal import Decimal

import pytest

from storefront.application.services import StockReconciliationService
from storefront.data.repositories import SqlAlchemyProductRepository
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.errors import (
    DataAccessError,
    InsufficientStockError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from storefront.domain.events import OrderConfirmedEvent


@pytest.fixture
def service(session_factory, event_bus):
    return StockReconciliationService(session_factory, event_bus)


@pytest.mark.asyncio
async def test_confirm_deducts_exact_quantities(service, seed, read_stock, read_order, make_product, make_order, make_item):
    simple = make_product(name="TB-500", stock=10)
    varied = make_product(name="BPC-157", variations=[("5mg", "50", 4), ("10mg", "80", 7)])
    five_mg, ten_mg = varied.variations
    order = make_order([
        make_item(simple.id, 3, product_name="TB-500"),
        make_item(varied.id, 4, variation_id=five_mg.id, variation_name="5mg"),
        make_item(varied.id, 2, variation_id=ten_mg.id, variation_name="10mg"),
    ])
    await seed(products=[simple, varied], orders=[order])

    confirmed = await service.confirm_order(order.id)

    assert confirmed.order_status == OrderStatus.CONFIRMED
    assert confirmed.payment_status == PaymentStatus.PAID
    assert await read_stock(simple.id) == 7
    assert await read_stock(varied.id, five_mg.id) == 0
    assert await read_stock(varied.id, ten_mg.id) == 5

    stored = await read_order(order.id)
    assert stored.order_status == OrderStatus.CONFIRMED
    assert stored.payment_status == PaymentStatus.PAID
    assert stored.updated_at >= order.updated_at


@pytest.mark.asyncio
async def test_insufficient_stock_writes_nothing(service, seed, read_stock, read_order, make_product, make_order, make_item):
    plenty = make_product(name="TB-500", stock=10)
    scarce = make_product(name="GHK-Cu", variations=[("50mg", "90", 1)])
    variation = scarce.variations[0]
    order = make_order([
        make_item(plenty.id, 2, product_name="TB-500"),
        make_item(scarce.id, 3, variation_id=variation.id, product_name="GHK-Cu", variation_name="50mg"),
    ])
    await seed(products=[plenty, scarce], orders=[order])

    with pytest.raises(InsufficientStockError) as exc_info:
        await service.confirm_order(order.id)

    assert str(exc_info.value) == "Insufficient stock for GHK-Cu 50mg. Available: 1, Required: 3"
    assert exc_info.value.available == 1
    assert exc_info.value.required == 3

    assert await read_stock(plenty.id) == 10
    assert await read_stock(scarce.id, variation.id) == 1
    stored = await read_order(order.id)
    assert stored.order_status == OrderStatus.NEW
    assert stored.payment_status == PaymentStatus.PENDING


@pytest.mark.asyncio
async def test_missing_product_counts_as_no_stock(service, seed, read_order, make_order, make_item):
    order = make_order([make_item("deleted-product", 1, product_name="Retired Blend")])
    await seed(orders=[order])

    with pytest.raises(InsufficientStockError) as exc_info:
        await service.confirm_order(order.id)

    assert exc_info.value.available == 0
    assert (await read_order(order.id)).order_status == OrderStatus.NEW


@pytest.mark.asyncio
async def test_failure_mid_deduction_rolls_back_earlier_items(
    service, seed, read_stock, read_order, make_product, make_order, make_item, monkeypatch
):
    first = make_product(name="TB-500", stock=10)
    second = make_product(name="BPC-157", stock=10)
    order = make_order([make_item(first.id, 2), make_item(second.id, 3)])
    await seed(products=[first, second], orders=[order])

    original = SqlAlchemyProductRepository.decrement_stock
    calls: list[str] = []

    async def fail_on_second_item(self, product_id, variation_id, quantity):
        calls.append(product_id)
        if len(calls) == 2:
            raise DataAccessError("decrement stock")
        return await original(self, product_id, variation_id, quantity)

    monkeypatch.setattr(SqlAlchemyProductRepository, "decrement_stock", fail_on_second_item)

    with pytest.raises(DataAccessError):
        await service.confirm_order(order.id)

    assert calls == [first.id, second.id]
    assert await read_stock(first.id) == 10
    assert await read_stock(second.id) == 10
    assert (await read_order(order.id)).order_status == OrderStatus.NEW


@pytest.mark.asyncio
async def test_stock_taken_after_precheck_is_not_oversold(
    service, seed, read_stock, read_order, make_product, make_order, make_item, monkeypatch
):
    first = make_product(name="TB-500", stock=10)
    contested = make_product(name="BPC-157", stock=1)
    order = make_order([make_item(first.id, 2), make_item(contested.id, 3, product_name="BPC-157")])
    await seed(products=[first, contested], orders=[order])

    async def stale_precheck(uow, order):
        return None

    # Simulates another confirmation winning the race after the pre-check
    monkeypatch.setattr(service, "_check_stock", stale_precheck)

    with pytest.raises(InsufficientStockError) as exc_info:
        await service.confirm_order(order.id)

    assert exc_info.value.available == 1
    assert await read_stock(first.id) == 10
    assert await read_stock(contested.id) == 1
    assert (await read_order(order.id)).order_status == OrderStatus.NEW


@pytest.mark.asyncio
async def test_confirmation_publishes_event_after_commit(service, event_bus, seed, make_product, make_order, make_item):
    product = make_product(stock=5)
    order = make_order([make_item(product.id, 2, price="500")], shipping_fee="50")
    await seed(products=[product], orders=[order])
    received: list[OrderConfirmedEvent] = []
    event_bus.subscribe(OrderConfirmedEvent, received.append)

    await service.confirm_order(order.id)

    assert len(received) == 1
    assert received[0].order_id == order.id
    assert received[0].total_quantity == 2
    assert received[0].final_total == Decimal("1050")


@pytest.mark.asyncio
async def test_failed_confirmation_publishes_nothing(service, event_bus, seed, make_product, make_order, make_item):
    product = make_product(stock=1)
    order = make_order([make_item(product.id, 2)])
    await seed(products=[product], orders=[order])
    received: list[OrderConfirmedEvent] = []
    event_bus.subscribe(OrderConfirmedEvent, received.append)

    with pytest.raises(InsufficientStockError):
        await service.confirm_order(order.id)

    assert received == []


@pytest.mark.asyncio
async def test_confirming_twice_is_rejected(service, seed, read_stock, make_product, make_order, make_item):
    product = make_product(stock=10)
    order = make_order([make_item(product.id, 4)])
    await seed(products=[product], orders=[order])

    await service.confirm_order(order.id)
    with pytest.raises(InvalidStatusTransitionError):
        await service.confirm_order(order.id)

    assert await read_stock(product.id) == 6


@pytest.mark.asyncio
async def test_unknown_order(service):
    with pytest.raises(OrderNotFoundError):
        await service.confirm_order("no-such-order")


@pytest.mark.asyncio
async def test_order_without_items_is_confirmed(service, seed, read_order, make_order):
    order = make_order([])
    await seed(orders=[order])

    await service.confirm_order(order.id)

    assert (await read_order(order.id)).order_status == OrderStatus.CONFIRMED
