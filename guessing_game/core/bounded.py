from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


class OutOfRange(ValueError):
    """Raised when a candidate integer falls outside a GuessRange."""

    def __init__(self, value: int, bounds: GuessRange):
        self.value = value
        self.bounds = bounds
        super().__init__(f"{value} is outside {bounds.low} through {bounds.high}")


@dataclass(frozen=True, slots=True)
class GuessRange:
    """An inclusive integer domain [low, high]."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high

    def bind(self, value: int) -> BoundedValue:
        return BoundedValue(bounds=self, value=value)

    def __str__(self) -> str:
        return f"{self.low} through {self.high}"


@total_ordering
@dataclass(frozen=True, slots=True)
class BoundedValue:
    """An integer guaranteed at construction to lie within `bounds`.

    Construction is the only validation gate: an out-of-range value raises
    `OutOfRange` carrying the rejected integer. Ordering is only defined between
    values sharing the same bounds.
    """

    bounds: GuessRange
    value: int

    def __post_init__(self) -> None:
        if not self.bounds.contains(self.value):
            raise OutOfRange(self.value, self.bounds)

    def _require_same_bounds(self, other: BoundedValue) -> None:
        if self.bounds != other.bounds:
            raise ValueError(f"Cannot compare values from {self.bounds} and {other.bounds}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        self._require_same_bounds(other)
        return self.value < other.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
