"""A two-dimensional size with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .point import _div

__all__ = ["Size"]


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: Any = 0
    height: Any = 0

    @classmethod
    def from_tuple(cls, pair: tuple[Any, Any]) -> Size:
        """Build a size from a (width, height) pair."""
        width, height = pair
        return cls(width, height)

    def convert(self, kind: Callable[[Any], Any]) -> Size:
        """Return a size with both components converted by ``kind``."""
        return Size(kind(self.width), kind(self.height))

    def __iter__(self) -> Iterator[Any]:
        yield self.width
        yield self.height

    def __add__(self, other: object) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: object) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, factor: Any) -> Size:
        if isinstance(factor, Size):
            return NotImplemented
        return Size(self.width * factor, self.height * factor)

    def __truediv__(self, divisor: Any) -> Size:
        if isinstance(divisor, Size):
            return NotImplemented
        return Size(_div(self.width, divisor), _div(self.height, divisor))

    def __neg__(self) -> Size:
        return Size(-self.width, -self.height)

    def __iadd__(self, other: object) -> Size:
        return self.__add__(other)

    def __isub__(self, other: object) -> Size:
        return self.__sub__(other)

    def __imul__(self, factor: Any) -> Size:
        return self.__mul__(factor)

    def __itruediv__(self, divisor: Any) -> Size:
        return self.__truediv__(divisor)