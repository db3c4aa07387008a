"""Exact monetary value type.

All arithmetic on monetary amounts goes through ``Money`` so that no
binary floating point ever touches a commission figure. Values are kept
at full ``Decimal`` precision; rounding happens only when rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: Decimal | int | str | float) -> Decimal:
    """Coerce a raw value to ``Decimal`` (floats go through ``str``)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Money:
    """Non-negative exact decimal amount."""

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    @classmethod
    def of(cls, value: Money | Decimal | int | str | float) -> Money:
        if isinstance(value, Money):
            return value
        return cls(to_decimal(value))

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def times(self, rate: Decimal | int | str | float) -> Money:
        """Multiply by a rate without rounding."""
        return Money(self.amount * to_decimal(rate))

    def divided_by(self, count: int) -> Money:
        """Split evenly across ``count`` items, rounded half-up to cents."""
        if count <= 0:
            return Money.zero()
        return Money((self.amount / Decimal(count)).quantize(CENT, rounding=ROUND_HALF_UP))

    def to_fixed(self) -> str:
        """Render with exactly two decimal places."""
        return format(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), "f")

    def __str__(self) -> str:
        return str(self.amount)


def sum_money(amounts) -> Money:
    """Exact sum of an iterable of ``Money``."""
    total = Money.zero()
    for amount in amounts:
        total = total + amount
    return total
