"""Money value object stored as integer minor units."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MONEY_PRECISION = Decimal("0.01")
MINOR_UNITS_PER_MAJOR = 100


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Represents a currency amount in integer minor units (cents)."""

    minor: int

    def __post_init__(self) -> None:
        if isinstance(self.minor, bool) or not isinstance(self.minor, int):
            raise TypeError("Money minor units must be an integer")

    @classmethod
    def from_decimal(cls, amount: Decimal) -> Money:
        """Create a money value from a decimal major-unit amount."""
        quantized = amount.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)
        return cls(minor=int(quantized * MINOR_UNITS_PER_MAJOR))

    @classmethod
    def zero(cls) -> Money:
        """Return a zero amount."""
        return cls(minor=0)

    def to_decimal(self) -> Decimal:
        """Return the amount in major units with two decimal places."""
        return (Decimal(self.minor) / MINOR_UNITS_PER_MAJOR).quantize(MONEY_PRECISION)

    def __add__(self, other: Money) -> Money:
        return Money(minor=self.minor + other.minor)

    def __sub__(self, other: Money) -> Money:
        return Money(minor=self.minor - other.minor)

    def __neg__(self) -> Money:
        return Money(minor=-self.minor)

    def __abs__(self) -> Money:
        return Money(minor=abs(self.minor))

    def is_zero(self) -> bool:
        return self.minor == 0

    def is_positive(self) -> bool:
        return self.minor > 0

    def is_negative(self) -> bool:
        return self.minor < 0


def sum_money(amounts: list[Money]) -> Money:
    """Add a list of amounts, returning zero for an empty list."""

    return Money(minor=sum(amount.minor for amount in amounts))


def parse_money(value: str) -> Money:
    """Parse a major-unit money string such as ``"12.50"``."""

    try:
        return Money.from_decimal(Decimal(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid money amount: {value!r}") from exc


def format_money(value: Money) -> str:
    """Render money as string with exactly two decimal places."""

    return f"{value.to_decimal():.2f}"


def split_evenly(total: Money, parts: int) -> list[Money]:
    """Divide total into integer shares that add up to exactly total.

    The remainder of the integer division is handed out one minor unit at a
    time to the first shares, so shares differ by at most one minor unit.
    """

    if parts <= 0:
        raise ValueError("parts must be a positive integer")
    base, remainder = divmod(total.minor, parts)
    return [
        Money(minor=base + (1 if index < remainder else 0)) for index in range(parts)
    ]
