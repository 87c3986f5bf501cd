"""Translation of SQLAlchemy failures into the domain DataAccessError."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.errors import DataAccessError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def data_access(operation: str) -> AsyncIterator[None]:
    """Wrap a block of store calls; any SQLAlchemyError becomes DataAccessError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Data store operation failed ({operation}): {exc}", exc_info=True)
        raise DataAccessError(operation, exc) from exc
