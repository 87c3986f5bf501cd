"""FastAPI application main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront import __version__
from storefront.data.database import close_database, create_engine, create_session_factory, init_database
from storefront.domain.errors import (
    DataAccessError,
    InsufficientStockError,
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from storefront.domain.event_bus import EventBus
from storefront.infrastructure.event_bus import get_event_bus
from storefront.infrastructure.logging import configure_logging, get_logger
from storefront.settings import AppSettings, get_app_settings

from console_api.v1.endpoints import health, inventory, orders, site_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database for the lifetime of the application."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.logging)

    engine = create_engine(settings.database)
    await init_database(engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Console API started")
    try:
        yield
    finally:
        await close_database(engine)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def insufficient_stock_handler(request: Request, exc: InsufficientStockError) -> JSONResponse:
    """Confirmation refused; the body names the item and both quantities."""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "item": exc.item_name,
            "available": exc.available,
            "required": exc.required,
        },
    )


async def invalid_transition_handler(request: Request, exc: InvalidStatusTransitionError) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, exc)


async def invalid_status_handler(request: Request, exc: InvalidOrderStatusError) -> JSONResponse:
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)


async def data_access_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    """Handle data store failures.

    Args:
        request: FastAPI request
        exc: DataAccessError exception

    Returns:
        JSONResponse without the driver message
    """
    logger.error(f"Data store failure during {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"Data store unavailable ({exc.operation})"},
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error in {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(settings: Optional[AppSettings] = None, event_bus: Optional[EventBus] = None) -> FastAPI:
    """Build the console API.

    Args:
        settings: Application settings; loaded from the environment when omitted
        event_bus: Bus shared by the services; the process-wide bus when omitted

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Glowform Console API",
        description="Order confirmation, inventory and site settings for the Glowform admin console",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_app_settings()
    app.state.event_bus = event_bus or get_event_bus()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(orders.router, prefix="/api/v1")
    app.include_router(inventory.router, prefix="/api/v1")
    app.include_router(site_settings.router, prefix="/api/v1")

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InsufficientStockError, insufficient_stock_handler)
    app.add_exception_handler(InvalidStatusTransitionError, invalid_transition_handler)
    app.add_exception_handler(InvalidOrderStatusError, invalid_status_handler)
    app.add_exception_handler(DataAccessError, data_access_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
