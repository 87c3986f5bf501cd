"""Integration tests for inventory endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient

from storefront.domain.enums import OrderStatus, PaymentStatus


def test_inventory_stats(test_client: TestClient, seed_store, make_product, make_order, make_item):
    simple = make_product(name="TB-500", price="100", stock=3)
    varied = make_product(name="BPC-157", variations=[("5mg", "50", 2), ("10mg", "80", 1)])
    sold = make_order(
        [make_item(simple.id, 2, price="500")],
        shipping_fee="50",
        order_status=OrderStatus.CONFIRMED,
        payment_status=PaymentStatus.PAID,
    )
    seed_store(products=[simple, varied], orders=[sold])

    response = test_client.get("/api/v1/inventory/stats")

    assert response.status_code == 200
    stats = response.json()
    assert Decimal(stats["total_sales"]) == Decimal("1050")
    assert stats["total_vials_sold"] == 2
    assert Decimal(stats["total_inventory_value"]) == Decimal("480")
    assert stats["low_stock_count"] == 2
    assert stats["total_items"] == 2
    assert stats["currency"] == "PHP"


def test_stats_of_empty_store(test_client: TestClient):
    stats = test_client.get("/api/v1/inventory/stats").json()

    assert Decimal(stats["total_sales"]) == 0
    assert stats["total_items"] == 0


def test_product_filters(test_client: TestClient, seed_store, make_product):
    empty = make_product(name="Empty", variations=[("5mg", "50", 0), ("10mg", "80", 0)])
    partial = make_product(name="Partial", category="skincare", variations=[("5mg", "50", 0), ("10mg", "80", 1)])
    seed_store(products=[empty, partial])

    out_of_stock = test_client.get("/api/v1/inventory/products", params={"stock": "out-of-stock"}).json()
    assert [p["name"] for p in out_of_stock] == ["Empty"]
    assert out_of_stock[0]["out_of_stock"] is True

    skincare = test_client.get("/api/v1/inventory/products", params={"category": "skincare"}).json()
    assert [p["name"] for p in skincare] == ["Partial"]
    assert [line["in_stock"] for line in skincare[0]["lines"]] == [True, False]

    assert test_client.get("/api/v1/inventory/products", params={"stock": "plenty"}).status_code == 422


def test_update_stock(test_client: TestClient, seed_store, make_product):
    product = make_product(variations=[("5mg", "50", 0)])
    variation = product.variations[0]
    seed_store(products=[product])

    response = test_client.patch(
        "/api/v1/inventory/stock",
        json={"product_id": product.id, "variation_id": variation.id, "new_stock": 12},
    )

    assert response.status_code == 200
    [listed] = test_client.get("/api/v1/inventory/products").json()
    assert listed["lines"][0]["stock_quantity"] == 12
    assert Decimal(listed["lines"][0]["stock_value"]) == Decimal("600")


def test_update_stock_validation(test_client: TestClient, seed_store, make_product):
    product = make_product(stock=4)
    seed_store(products=[product])

    negative = test_client.patch(
        "/api/v1/inventory/stock",
        json={"product_id": product.id, "new_stock": -1},
    )
    unknown = test_client.patch(
        "/api/v1/inventory/stock",
        json={"product_id": "missing", "new_stock": 3},
    )

    assert negative.status_code == 422
    assert unknown.status_code == 404
    [listed] = test_client.get("/api/v1/inventory/products").json()
    assert listed["lines"][0]["stock_quantity"] == 4
