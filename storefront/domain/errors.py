"""
Domain exceptions.

Raised by repositories and application services when a store call fails or a
business rule is violated. The API layer translates them into HTTP responses.
"""
from typing import Optional


class StorefrontError(Exception):
    """Base class for all storefront errors."""


class DataAccessError(StorefrontError):
    """Reading from or writing to the data store failed."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Data store operation failed ({operation}){detail}")


class InsufficientStockError(StorefrontError):
    """A line item asks for more units than are currently in stock."""

    def __init__(self, item_name: str, available: int, required: int):
        self.item_name = item_name
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient stock for {item_name}. "
            f"Available: {available}, Required: {required}"
        )


class NotFoundError(StorefrontError, LookupError):
    """A referenced row does not exist."""


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str, variation_id: Optional[str] = None):
        self.product_id = product_id
        self.variation_id = variation_id
        target = f"variation {variation_id}" if variation_id else f"product {product_id}"
        super().__init__(f"Stock target not found: {target}")


class SettingNotFoundError(NotFoundError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Site setting not found: {key}")


class InvalidOrderStatusError(StorefrontError, ValueError):
    """Status value outside the known order statuses."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Unknown order status: {status}")


class InvalidStatusTransitionError(StorefrontError, ValueError):
    """Status change not allowed by the order workflow."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Transition {current} -> {target} is not allowed")
