"""Tests for the Order aggregate and catalog entities."""

from decimal import Decimal

import pytest

from storefront.domain.entities import Order, OrderItem
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.errors import InvalidStatusTransitionError
from storefront.domain.events import OrderConfirmedEvent, OrderStatusChangedEvent
from storefront.domain.value_objects import Money

def test_order_item_requires_positive_quantity():
    with pytest.raises(ValueError):
        OrderItem(
            product_id="p-1",
            product_name="BPC-157",
            quantity=0,
            price=Money(Decimal("500")),
            total=Money(Decimal("0")),
        )

def test_order_item_display_name(make_item):
    assert make_item("p-1", 1).display_name == "BPC-157"
    assert make_item("p-1", 1, variation_id="v-1", variation_name="10mg").display_name == "BPC-157 10mg"

def test_final_total_adds_shipping_fee(make_order, make_item):
    order = make_order([make_item("p-1", 2, price="500")], shipping_fee="50")

    assert order.total_price.amount == Decimal("1000")
    assert order.final_total.amount == Decimal("1050")
    assert order.total_quantity == 2

def test_final_total_without_shipping_fee(make_order, make_item):
    order = make_order([make_item("p-1", 1, price="750")])

    assert order.final_total.amount == Decimal("750")

def test_short_reference_is_upper_case_prefix(make_order):
    order = make_order(id="abcdef12-0000-0000-0000-000000000000")

    assert order.short_reference == "ABCDEF12"

def test_mark_confirmed_records_event(make_order, make_item):
    order = make_order([make_item("p-1", 2)], shipping_fee="50")

    order.mark_confirmed()

    assert order.order_status == OrderStatus.CONFIRMED
    assert order.payment_status == PaymentStatus.PAID
    assert order.is_revenue

    events = order.get_domain_events()
    assert len(events) == 1
    assert isinstance(events[0], OrderConfirmedEvent)
    assert events[0].aggregate_id == order.id
    assert events[0].total_quantity == 2
    assert events[0].final_total == Decimal("1050")

    order.clear_domain_events()
    assert order.get_domain_events() == []

def test_mark_confirmed_only_from_new(make_order):
    order = make_order(order_status=OrderStatus.SHIPPED, payment_status=PaymentStatus.PAID)

    with pytest.raises(InvalidStatusTransitionError):
        order.mark_confirmed()
    assert order.order_status == OrderStatus.SHIPPED

def test_change_status_returns_previous_and_records_event(make_order):
    order = make_order(order_status=OrderStatus.PROCESSING, payment_status=PaymentStatus.PAID)

    previous = order.change_status("shipped")

    assert previous == OrderStatus.PROCESSING
    assert order.order_status == OrderStatus.SHIPPED
    [event] = order.get_domain_events()
    assert isinstance(event, OrderStatusChangedEvent)
    assert (event.previous_status, event.new_status) == ("processing", "shipped")

def test_change_status_to_same_value_records_nothing(make_order):
    order = make_order(order_status=OrderStatus.SHIPPED, payment_status=PaymentStatus.PAID)

    order.change_status(OrderStatus.SHIPPED)

    assert order.order_status == OrderStatus.SHIPPED
    assert order.get_domain_events() == []

def test_new_unpaid_order_is_not_revenue(make_order):
    assert not make_order().is_revenue
    assert not make_order(order_status=OrderStatus.CANCELLED, payment_status=PaymentStatus.PAID).is_revenue

def test_event_serialisation_keeps_exact_amounts():
    event = OrderConfirmedEvent(order_id="o-1", total_quantity=3, final_total=Decimal("1050.00"))

    data = event.to_dict()

    assert data["event_type"] == "OrderConfirmedEvent"
    assert data["aggregate_type"] == "Order"
    assert data["aggregate_id"] == "o-1"
    assert data["data"]["final_total"] == "1050.00"

class TestProduct:

    def test_effective_price_uses_active_discount(self, make_product):
        product = make_product(price="100", discount_price=Money(Decimal("80")), discount_active=True)

        assert product.effective_price.amount == Decimal("80")

    def test_inactive_or_zero_discount_is_ignored(self, make_product):
        inactive = make_product(price="100", discount_price=Money(Decimal("80")), discount_active=False)
        zero = make_product(price="100", discount_price=Money(Decimal("0")), discount_active=True)

        assert inactive.effective_price.amount == Decimal("100")
        assert zero.effective_price.amount == Decimal("100")

    def test_stock_value_with_and_without_variations(self, make_product):
        simple = make_product(price="100", stock=3)
        varied = make_product(variations=[("5mg", "50", 2), ("10mg", "80", 1)])

        assert simple.stock_value().amount == Decimal("300")
        assert varied.stock_value().amount == Decimal("180")

    def test_stock_level_predicates(self, make_product):
        low = make_product(variations=[("5mg", "50", 3), ("10mg", "80", 10)])
        empty = make_product(variations=[("5mg", "50", 0), ("10mg", "80", 0)])
        at_threshold = make_product(stock=5)

        assert low.is_low_stock(5)
        assert low.is_in_stock()
        assert empty.is_out_of_stock()
        assert not empty.is_low_stock(5)
        assert not at_threshold.is_low_stock(5)

def test_order_defaults():
    order = Order(
        customer_name="Ana",
        customer_email="ana@example.com",
        customer_phone="0917",
        total_price=Money.zero(),
    )

    assert order.order_status == OrderStatus.NEW
    assert order.payment_status == PaymentStatus.PENDING
    assert order.created_at.tzinfo is not None
