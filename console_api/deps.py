"""
FastAPI dependencies for dependency injection.

Engine, session factory and event bus are created by the application
lifespan and kept on app.state; services are built per request from them.
"""
from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from storefront.application.services import (  # noqa: E402
    InventoryService,
    OrderQueryService,
    OrderStatusService,
    SiteSettingsService,
    StockReconciliationService,
)
from storefront.domain.event_bus import EventBus  # noqa: E402
from storefront.settings import AppSettings  # noqa: E402


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return request.app.state.session_factory


def get_event_bus(request: Request) -> EventBus:
    return request.app.state.event_bus


def get_order_query_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    settings: AppSettings = Depends(get_settings),
) -> OrderQueryService:
    return OrderQueryService(session_factory, currency=settings.store.currency)


def get_reconciliation_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    event_bus: EventBus = Depends(get_event_bus),
    settings: AppSettings = Depends(get_settings),
) -> StockReconciliationService:
    return StockReconciliationService(session_factory, event_bus, currency=settings.store.currency)


def get_order_status_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    event_bus: EventBus = Depends(get_event_bus),
    settings: AppSettings = Depends(get_settings),
) -> OrderStatusService:
    return OrderStatusService(session_factory, event_bus, currency=settings.store.currency)


def get_inventory_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    event_bus: EventBus = Depends(get_event_bus),
    settings: AppSettings = Depends(get_settings),
) -> InventoryService:
    """Get InventoryService instance.

    Returns:
        InventoryService configured with the store currency and threshold
    """
    return InventoryService(
        session_factory,
        event_bus,
        currency=settings.store.currency,
        low_stock_threshold=settings.store.low_stock_threshold,
    )


def get_site_settings_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> SiteSettingsService:
    return SiteSettingsService(session_factory)
