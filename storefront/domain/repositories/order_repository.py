"""Repository interface for the Order aggregate."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..entities.order import Order
from ..enums import OrderStatus, PaymentStatus


class OrderRepository(ABC):
    """Abstract repository for Order persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Insert a new order (checkout and seeding only)."""

    @abstractmethod
    async def get(self, order_id: str) -> Optional[Order]:
        """Retrieve order by identifier.

        Returns:
            Order if found, None otherwise
        """

    @abstractmethod
    async def list_all(self) -> List[Order]:
        """All orders, newest first (created_at descending)."""

    @abstractmethod
    async def list_by_status(
        self,
        statuses: Iterable[OrderStatus],
        payment_status: Optional[PaymentStatus] = None,
    ) -> List[Order]:
        """Orders whose status is in `statuses` (and payment status, when given)."""

    @abstractmethod
    async def update_status(self, order: Order) -> bool:
        """Write order_status, payment_status and updated_at of `order`.

        Returns:
            False when no row matched the order id
        """
