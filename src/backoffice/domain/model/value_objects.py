"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from backoffice.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount in integer cents.

    All arithmetic stays in whole cents; fractional results (percentages)
    go through Decimal and are rounded half-up to the nearest cent.
    """

    cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise ValidationError(
                f"Money amount must be integer cents, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.cents}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    def __lt__(self, other: Money) -> bool:
        return self.cents < other.cents

    def __le__(self, other: Money) -> bool:
        return self.cents <= other.cents

    def percent(self, rate: Decimal) -> Money:
        """Return ``rate`` (e.g. ``Decimal("0.10")``) of this amount."""
        value = (Decimal(self.cents) * rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return Money(int(value))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.cents // 100}.{self.cents % 100:02d}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
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
