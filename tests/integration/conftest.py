"""Pytest configuration and fixtures for integration tests."""

from typing import Generator, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from console_api.main import create_app
from storefront.data.uow import create_uow
from storefront.domain.entities import Order, Product
from storefront.settings import AppSettings, DatabaseSettings, LoggingSettings, StoreSettings

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(DATABASE_URL=TEST_DATABASE_URL),
        store=StoreSettings(STORE_CURRENCY="PHP", LOW_STOCK_THRESHOLD=5),
        logging=LoggingSettings(LOG_LEVEL="WARNING"),
    )


@pytest.fixture
def test_client(app_settings, event_bus) -> Generator[TestClient, None, None]:
    """FastAPI test client; the lifespan creates the database inside the client's loop."""
    app = create_app(app_settings, event_bus)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seed_store(test_client: TestClient):
    """Insert rows through the running app's session factory."""

    def _seed(
        products: Sequence[Product] = (),
        orders: Sequence[Order] = (),
        site_settings: Optional[dict] = None,
    ) -> None:
        async def _write() -> None:
            async with create_uow(test_client.app.state.session_factory) as uow:
                for product in products:
                    await uow.products.add(product)
                for order in orders:
                    await uow.orders.add(order)
                if site_settings:
                    await uow.site_settings.upsert_many(site_settings)
                await uow.commit()

        test_client.portal.call(_write)

    return _seed
