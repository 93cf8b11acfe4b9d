"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pim.domain.exceptions import ValidationError

CENTS = Decimal("0.01")

# Largest amount a decimal(10,2) column holds.
MAX_AMOUNT = Decimal("99999999.99")


@dataclass(frozen=True)
class Money:
    """Monetary amount with two fractional digits, at most 99,999,999.99.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in cost and price totals.
    """

    amount: Decimal

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
        if self.amount > MAX_AMOUNT:
            raise _too_large(self.amount)
        try:
            quantized = self.amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise _too_large(self.amount) from exc
        if quantized > MAX_AMOUNT:
            raise _too_large(self.amount)
        object.__setattr__(self, "amount", quantized)

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def to_string(self) -> str:
        """Exact-decimal wire form, e.g. ``"150.00"``."""
        return f"{self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | int | Decimal, field: str | None = None) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats are refused: they cannot carry an exact currency amount.
        """
        if isinstance(amount, (float, bool)):
            raise ValidationError(
                f"Invalid money amount: {amount!r} (use a decimal string)", field
            )
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}", field) from exc
        except ValidationError as exc:
            raise ValidationError(str(exc), field) from exc

    @staticmethod
    def mean(amounts: list[Money]) -> Money:
        """Average of *amounts*, zero for an empty list."""
        if not amounts:
            return Money.zero()
        total = sum((m.amount for m in amounts), Decimal("0"))
        return Money(total / len(amounts))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a pull-list line always commits at least
    one unit.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                "quantity",
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive", "quantity")

    def __str__(self) -> str:
        return str(self.value)


def _too_large(amount: Decimal) -> ValidationError:
    return ValidationError(
        f"Money amount exceeds the maximum of {MAX_AMOUNT:,}, got {amount}"
    )
