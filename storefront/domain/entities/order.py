"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Union
import uuid

from ..enums import OrderStatus, PaymentStatus, REVENUE_STATUSES
from ..errors import InvalidStatusTransitionError
from ..events.base import DomainEvent
from ..value_objects import Money
from ..workflow import parse_status, validate_transition


@dataclass(frozen=True)
class OrderItem:
    """Line item embedded in an order. Never mutated after checkout."""
    product_id: str
    product_name: str
    quantity: int
    price: Money
    total: Money
    variation_id: Optional[str] = None
    variation_name: Optional[str] = None
    purity_percentage: Optional[float] = None

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")

    @property
    def display_name(self) -> str:
        if self.variation_name:
            return f"{self.product_name} {self.variation_name}"
        return self.product_name


@dataclass
class Order:
    """
    Order aggregate root.

    Created by checkout as new/pending. Moved forward by stock
    reconciliation (confirm) and by manual workflow actions.
    """
    customer_name: str
    customer_email: str
    customer_phone: str
    total_price: Money
    order_items: List[OrderItem] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Shipping
    shipping_address: str = ""
    shipping_city: str = ""
    shipping_state: str = ""
    shipping_zip_code: str = ""
    shipping_country: str = ""
    shipping_location: Optional[str] = None
    shipping_fee: Optional[Money] = None

    # Payment / contact
    payment_method_id: Optional[str] = None
    payment_method_name: Optional[str] = None
    payment_proof_url: Optional[str] = None
    contact_method: Optional[str] = None

    order_status: OrderStatus = OrderStatus.NEW
    payment_status: PaymentStatus = PaymentStatus.PENDING
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Event collection, published by the application layer after commit
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def short_reference(self) -> str:
        """Human-facing order number shown on cards and in confirmations."""
        return self.id[:8].upper()

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.order_items)

    @property
    def final_total(self) -> Money:
        """Item total plus shipping fee (when charged)."""
        if self.shipping_fee is None:
            return self.total_price
        return self.total_price + self.shipping_fee

    @property
    def is_revenue(self) -> bool:
        """Paid and past creation: counts towards sales figures."""
        return (
            self.payment_status == PaymentStatus.PAID
            and self.order_status in REVENUE_STATUSES
        )

    def mark_confirmed(self, at: Optional[datetime] = None) -> None:
        """
        Business rule: confirmation is only possible from new.

        Stock deduction is the caller's job; this only moves the state and
        records the event.
        """
        from ..events.order_events import OrderConfirmedEvent

        if self.order_status != OrderStatus.NEW:
            raise InvalidStatusTransitionError(self.order_status.value, OrderStatus.CONFIRMED.value)

        self.order_status = OrderStatus.CONFIRMED
        self.payment_status = PaymentStatus.PAID
        self.updated_at = at or datetime.now(timezone.utc)
        self._record_event(
            OrderConfirmedEvent(
                order_id=self.id,
                total_quantity=self.total_quantity,
                final_total=self.final_total.amount,
            )
        )

    def change_status(
        self,
        new_status: Union[str, OrderStatus],
        at: Optional[datetime] = None,
    ) -> OrderStatus:
        """
        Apply a manual workflow action.

        Returns:
            The previous status
        """
        from ..events.order_events import OrderStatusChangedEvent

        target = parse_status(new_status)
        validate_transition(self.order_status, target)

        previous = self.order_status
        self.order_status = target
        self.updated_at = at or datetime.now(timezone.utc)
        if previous != target:
            self._record_event(
                OrderStatusChangedEvent(
                    order_id=self.id,
                    previous_status=previous.value,
                    new_status=target.value,
                )
            )
        return previous

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
