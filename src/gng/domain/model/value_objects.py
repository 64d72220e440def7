"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from gng.domain.exceptions import ValidationError

CURRENCY = "INR"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount in rupees.

    Uses Decimal so that sums of prices such as 4.2 + 1.8 stay exact.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def difference(self, other: Money) -> Decimal:
        """Signed ``self - other``; used for profit, which can be negative."""
        self._assert_same_currency(other)
        return self.amount - other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_amount(self.amount)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def clamped(amount: str | float | int | Decimal) -> Money:
        """Like ``of`` but negative amounts become zero."""
        value = to_decimal(amount)
        return Money(max(Decimal("0"), value))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Parse a finite number, raising ValidationError otherwise."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid number: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid number: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Number must be finite, got {value!r}")
    return result


def format_amount(amount: Decimal) -> str:
    """Render a signed amount as rupees, e.g. ``₹15.00`` or ``-₹3.50``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{abs(amount):,.2f}"
