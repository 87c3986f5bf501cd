"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from storefront.domain.entities import Order, OrderItem, Product, Variation
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.value_objects import Money

from .models import OrderModel, ProductModel, ProductVariationModel


def _money(value: Any, currency: str) -> Money:
    return Money(amount=Decimal(str(value)), currency=currency)


def _optional_money(value: Any, currency: str) -> Optional[Money]:
    if value is None:
        return None
    return _money(value, currency)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored timestamps are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrderItemMapper:
    """Static mapper for OrderItem ↔ JSON line item."""

    @staticmethod
    def to_domain(data: Dict[str, Any], currency: str) -> OrderItem:
        """Convert a stored JSON line item to a domain entity.

        Args:
            data: Line item dictionary from orders.order_items
            currency: Store currency code

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            product_id=data["product_id"],
            product_name=data.get("product_name", ""),
            variation_id=data.get("variation_id"),
            variation_name=data.get("variation_name"),
            quantity=int(data["quantity"]),
            price=_money(data["price"], currency),
            total=_money(data["total"], currency),
            purity_percentage=data.get("purity_percentage"),
        )

    @staticmethod
    def to_persistence(entity: OrderItem) -> Dict[str, Any]:
        """Convert domain entity to a JSON-safe dictionary.

        Amounts are stored as strings so no precision is lost.
        """
        data = {
            "product_id": entity.product_id,
            "product_name": entity.product_name,
            "variation_id": entity.variation_id,
            "variation_name": entity.variation_name,
            "quantity": entity.quantity,
            "price": str(entity.price.amount),
            "total": str(entity.total.amount),
        }
        if entity.purity_percentage is not None:
            data["purity_percentage"] = entity.purity_percentage
        return data


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel, currency: str) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel instance
            currency: Store currency code

        Returns:
            Order domain aggregate
        """
        return Order(
            id=model.id,
            customer_name=model.customer_name,
            customer_email=model.customer_email,
            customer_phone=model.customer_phone or "",
            contact_method=model.contact_method,
            shipping_address=model.shipping_address or "",
            shipping_city=model.shipping_city or "",
            shipping_state=model.shipping_state or "",
            shipping_zip_code=model.shipping_zip_code or "",
            shipping_country=model.shipping_country or "",
            shipping_location=model.shipping_location,
            shipping_fee=_optional_money(model.shipping_fee, currency),
            order_items=[
                OrderItemMapper.to_domain(item, currency) for item in (model.order_items or [])
            ],
            total_price=_money(model.total_price, currency),
            payment_method_id=model.payment_method_id,
            payment_method_name=model.payment_method_name,
            payment_proof_url=model.payment_proof_url,
            order_status=OrderStatus(model.order_status),
            payment_status=PaymentStatus(model.payment_status),
            notes=model.notes,
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model."""
        return OrderModel(
            id=entity.id,
            customer_name=entity.customer_name,
            customer_email=entity.customer_email,
            customer_phone=entity.customer_phone,
            contact_method=entity.contact_method,
            shipping_address=entity.shipping_address,
            shipping_city=entity.shipping_city,
            shipping_state=entity.shipping_state,
            shipping_zip_code=entity.shipping_zip_code,
            shipping_country=entity.shipping_country,
            shipping_location=entity.shipping_location,
            shipping_fee=entity.shipping_fee.amount if entity.shipping_fee is not None else None,
            order_items=[OrderItemMapper.to_persistence(item) for item in entity.order_items],
            total_price=entity.total_price.amount,
            payment_method_id=entity.payment_method_id,
            payment_method_name=entity.payment_method_name,
            payment_proof_url=entity.payment_proof_url,
            order_status=entity.order_status.value,
            payment_status=entity.payment_status.value,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class ProductMapper:
    """Static mapper for Product ↔ ProductModel (variations included)."""

    @staticmethod
    def to_domain(model: ProductModel, currency: str) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            description=model.description or "",
            category=model.category or "",
            base_price=_money(model.base_price, currency),
            discount_price=_optional_money(model.discount_price, currency),
            discount_active=bool(model.discount_active),
            stock_quantity=model.stock_quantity,
            variations=[
                Variation(
                    id=variation.id,
                    product_id=model.id,
                    name=variation.name,
                    price=_money(variation.price, currency),
                    stock_quantity=variation.stock_quantity,
                )
                for variation in model.variations
            ],
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            category=entity.category,
            base_price=entity.base_price.amount,
            discount_price=entity.discount_price.amount if entity.discount_price is not None else None,
            discount_active=entity.discount_active,
            stock_quantity=entity.stock_quantity,
            variations=[
                ProductVariationModel(
                    id=variation.id,
                    name=variation.name,
                    price=variation.price.amount,
                    stock_quantity=variation.stock_quantity,
                )
                for variation in entity.variations
            ],
        )
