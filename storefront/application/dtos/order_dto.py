"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from storefront.domain.entities import Order, OrderItem


class OrderItemDTO(BaseModel):
    """DTO for order line item."""

    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name at checkout")
    variation_id: Optional[str] = Field(None, description="Variation ID, when a variation was bought")
    variation_name: Optional[str] = Field(None, description="Variation name (dosage/size)")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    price: Decimal = Field(..., ge=0, description="Unit price")
    total: Decimal = Field(..., ge=0, description="Line total")
    purity_percentage: Optional[float] = Field(None, description="Lab purity")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    reference: str = Field(..., description="Short order reference")
    customer_name: str = Field(..., description="Customer name")
    customer_email: str = Field(..., description="Customer email address")
    customer_phone: str = Field(..., description="Customer phone number")
    shipping_address: str = Field(default="", description="Street address")
    shipping_city: str = Field(default="", description="City")
    shipping_state: str = Field(default="", description="State / province")
    shipping_zip_code: str = Field(default="", description="ZIP code")
    shipping_country: str = Field(default="", description="Country")
    shipping_location: Optional[str] = Field(None, description="Shipping zone")
    shipping_fee: Optional[Decimal] = Field(None, ge=0, description="Shipping fee")
    order_items: List[OrderItemDTO] = Field(default_factory=list, description="Line items")
    total_price: Decimal = Field(..., ge=0, description="Item total")
    final_total: Decimal = Field(..., ge=0, description="Item total plus shipping fee")
    total_quantity: int = Field(..., ge=0, description="Units across all line items")
    currency: str = Field(..., description="Currency code")
    order_status: str = Field(..., description="Order status")
    payment_status: str = Field(..., description="Payment status")
    payment_method_name: Optional[str] = Field(None, description="Payment method")
    payment_proof_url: Optional[str] = Field(None, description="Uploaded proof of payment")
    contact_method: Optional[str] = Field(None, description="Preferred contact method")
    notes: Optional[str] = Field(None, description="Customer notes")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = {"frozen": True}


class OrderListDTO(BaseModel):
    """DTO for the filtered orders board."""

    orders: List[OrderDTO] = Field(default_factory=list, description="Orders matching the filters")
    total: int = Field(..., ge=0, description="Number of matching orders")
    counts: Dict[str, int] = Field(default_factory=dict, description="Orders per status, plus 'all'")

    model_config = {"frozen": True}


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for a manual status change."""

    order_status: str = Field(..., min_length=1, description="Target order status")

    model_config = {"frozen": True}


class OrderActionDTO(BaseModel):
    """Workflow action available for an order."""

    action: str = Field(..., description="confirm, advance or cancel")
    target: str = Field(..., description="Status the action leads to")

    model_config = {"frozen": True}


def order_item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        variation_id=item.variation_id,
        variation_name=item.variation_name,
        quantity=item.quantity,
        price=item.price.amount,
        total=item.total.amount,
        purity_percentage=item.purity_percentage,
    )


def order_to_dto(order: Order) -> OrderDTO:
    """Convert an Order entity to its response DTO.

    Args:
        order: Order domain entity

    Returns:
        OrderDTO instance
    """
    return OrderDTO(
        id=order.id,
        reference=order.short_reference,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        customer_phone=order.customer_phone,
        shipping_address=order.shipping_address,
        shipping_city=order.shipping_city,
        shipping_state=order.shipping_state,
        shipping_zip_code=order.shipping_zip_code,
        shipping_country=order.shipping_country,
        shipping_location=order.shipping_location,
        shipping_fee=order.shipping_fee.amount if order.shipping_fee else None,
        order_items=[order_item_to_dto(item) for item in order.order_items],
        total_price=order.total_price.amount,
        final_total=order.final_total.amount,
        total_quantity=order.total_quantity,
        currency=order.total_price.currency,
        order_status=order.order_status.value,
        payment_status=order.payment_status.value,
        payment_method_name=order.payment_method_name,
        payment_proof_url=order.payment_proof_url,
        contact_method=order.contact_method,
        notes=order.notes,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
