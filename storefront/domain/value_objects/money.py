"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_CURRENCY = "PHP"


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Used for prices, line totals, shipping fees and aggregated sales.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Zero amount in the given currency."""
        return cls(amount=Decimal("0"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Scale by an integer quantity (stock count, units ordered)."""
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise TypeError(f"Money can only be multiplied by int, got: {quantity!r}")
        return Money(amount=self.amount * quantity, currency=self.currency)

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0
