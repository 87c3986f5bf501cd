"""SQLAlchemy ORM model for the orders table."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Index, Numeric, String, Text

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderModel(Base):
    """
    Order database model.

    Line items are embedded as a JSON list: they belong to the order and are
    never updated after checkout.
    """

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)

    # Customer
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=False, default="")
    contact_method = Column(String(50), nullable=True)

    # Shipping
    shipping_address = Column(Text, nullable=False, default="")
    shipping_city = Column(String(120), nullable=False, default="")
    shipping_state = Column(String(120), nullable=False, default="")
    shipping_zip_code = Column(String(20), nullable=False, default="")
    shipping_country = Column(String(120), nullable=False, default="")
    shipping_location = Column(String(120), nullable=True)
    shipping_fee = Column(Numeric(12, 2), nullable=True)

    # Items and totals
    order_items = Column(JSON, nullable=False, default=list)
    total_price = Column(Numeric(12, 2), nullable=False)

    # Payment
    payment_method_id = Column(String(36), nullable=True)
    payment_method_name = Column(String(120), nullable=True)
    payment_proof_url = Column(Text, nullable=True)

    # Status
    order_status = Column(String(20), nullable=False, default="new", index=True)
    payment_status = Column(String(20), nullable=False, default="pending")
    notes = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_orders_created_at", "created_at"),
        Index("ix_orders_status_payment", "order_status", "payment_status"),
    )
