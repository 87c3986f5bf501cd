"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.domain.value_objects import DEFAULT_CURRENCY

from .errors import data_access
from .repositories import (
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemySiteSettingsRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories
    """

    def __init__(self, session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
            currency: Store currency passed to repositories
        """
        self._session_factory = session_factory
        self._currency = currency
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None
        self._site_settings_repository: Optional[SqlAlchemySiteSettingsRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back anything not committed, then release the session."""
        try:
            if exc_type is not None:
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._order_repository = None
            self._product_repository = None
            self._site_settings_repository = None

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        session = self._require_session()
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(session, self._currency)
        return self._order_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        session = self._require_session()
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(session, self._currency)
        return self._product_repository

    @property
    def site_settings(self) -> SqlAlchemySiteSettingsRepository:
        """Lazy-load site settings repository."""
        session = self._require_session()
        if self._site_settings_repository is None:
            self._site_settings_repository = SqlAlchemySiteSettingsRepository(session)
        return self._site_settings_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        session = self._require_session()
        async with data_access("commit"):
            await session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        session = self._require_session()
        await session.rollback()


def create_uow(session_factory: async_sessionmaker, currency: str = DEFAULT_CURRENCY) -> UnitOfWork:
    """Factory function for creating Unit of Work instances.

    Args:
        session_factory: SQLAlchemy async session factory
        currency: Store currency passed to repositories

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory, currency)
