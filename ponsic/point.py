"""A two-dimensional point with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

__all__ = ["Point"]


def _div(value: Any, divisor: Any) -> Any:
    """Divide like a typed language would.

    Two integers give an integer quotient truncated toward zero. Anything
    else uses true division. Dividing by zero raises ZeroDivisionError.
    """
    if isinstance(value, int) and isinstance(divisor, int):
        quotient = abs(value) // abs(divisor)
        return quotient if (value < 0) == (divisor < 0) else -quotient
    return value / divisor


@dataclass(frozen=True)
class Point:
    """A point with an x and a y coordinate."""

    x: Any = 0
    y: Any = 0

    @classmethod
    def from_tuple(cls, pair: tuple[Any, Any]) -> Point:
        """Build a point from an (x, y) pair."""
        x, y = pair
        return cls(x, y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Any) -> Point:
        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: Any) -> Point:
        if isinstance(divisor, Point):
            return NotImplemented
        return Point(_div(self.x, divisor), _div(self.y, divisor))

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __iadd__(self, other: object) -> Point:
        return self.__add__(other)

    def __isub__(self, other: object) -> Point:
        return self.__sub__(other)

    def __imul__(self, factor: Any) -> Point:
        return self.__mul__(factor)

    def __itruediv__(self, divisor: Any) -> Point:
        return self.__truediv__(divisor)