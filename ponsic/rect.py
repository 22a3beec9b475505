"""An axis-aligned rectangle kept in normalized form."""

from __future__ import annotations

from typing import Any

from .point import Point, _div
from .size import Size

__all__ = ["Rect"]


class Rect:
    """A rectangle given by its left, top, right and bottom edges.

    Construction, the edge setters and ``adjust`` keep the rectangle
    normalized: left <= right and top <= bottom.
    """

    __slots__ = ("_left", "_top", "_right", "_bottom")

    def __init__(self, left: Any = 0, top: Any = 0, right: Any = 0, bottom: Any = 0) -> None:
        self._left = left
        self._top = top
        self._right = right
        self._bottom = bottom
        self.normalize()

    @classmethod
    def _raw(cls, left: Any, top: Any, right: Any, bottom: Any) -> Rect:
        rect = cls.__new__(cls)
        rect._left = left
        rect._top = top
        rect._right = right
        rect._bottom = bottom
        return rect

    @classmethod
    def from_point_size(cls, pos: Point, size: Size) -> Rect:
        """Build a rectangle from its top-left corner and its size, unnormalized."""
        return cls._raw(pos.x, pos.y, pos.x + size.width, pos.y + size.height)

    def _edges(self) -> tuple[Any, Any, Any, Any]:
        return self._left, self._top, self._right, self._bottom

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self._edges() == other._edges()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Rect(left={self._left!r}, top={self._top!r}, "
            f"right={self._right!r}, bottom={self._bottom!r})"
        )

    @property
    def left(self) -> Any:
        return self._left

    @left.setter
    def left(self, value: Any) -> None:
        self._left = value
        self.normalize()

    @property
    def top(self) -> Any:
        return self._top

    @top.setter
    def top(self, value: Any) -> None:
        self._top = value
        self.normalize()

    @property
    def right(self) -> Any:
        return self._right

    @right.setter
    def right(self, value: Any) -> None:
        self._right = value
        self.normalize()

    @property
    def bottom(self) -> Any:
        return self._bottom

    @bottom.setter
    def bottom(self, value: Any) -> None:
        self._bottom = value
        self.normalize()

    def left_top(self) -> Point:
        return Point(self._left, self._top)

    def right_top(self) -> Point:
        return Point(self._right, self._top)

    def left_bottom(self) -> Point:
        return Point(self._left, self._bottom)

    def right_bottom(self) -> Point:
        return Point(self._right, self._bottom)

    def set_left_top(self, left: Any, top: Any) -> None:
        self._left = left
        self._top = top
        self.normalize()

    def set_right_top(self, right: Any, top: Any) -> None:
        self._right = right
        self._top = top
        self.normalize()

    def set_left_bottom(self, left: Any, bottom: Any) -> None:
        self._left = left
        self._bottom = bottom
        self.normalize()

    def set_right_bottom(self, right: Any, bottom: Any) -> None:
        self._right = right
        self._bottom = bottom
        self.normalize()

    def width(self) -> Any:
        """Right minus left; negative only if the rectangle is not normalized."""
        return self._right - self._left

    def height(self) -> Any:
        """Bottom minus top; negative only if the rectangle is not normalized."""
        return self._bottom - self._top

    def size(self) -> Size:
        return Size(self.width(), self.height())

    def is_normalized(self) -> bool:
        return self._left <= self._right and self._top <= self._bottom

    def normalize(self) -> None:
        """Swap edges so that left <= right and top <= bottom."""
        if self._left > self._right:
            self._left, self._right = self._right, self._left
        if self._top > self._bottom:
            self._top, self._bottom = self._bottom, self._top

    def contains(self, point: Point) -> bool:
        """Whether the point lies strictly inside, excluding the border."""
        return self._left < point.x < self._right and self._top < point.y < self._bottom

    def contains_with_bound(self, point: Point) -> bool:
        """Whether the point lies inside or on the border."""
        return (
            self._left <= point.x <= self._right
            and self._top <= point.y <= self._bottom
        )

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles share any area or edge."""
        return (
            self._left <= other._right
            and self._top <= other._bottom
            and self._right >= other._left
            and self._bottom >= other._top
        )

    def intersected(self, other: Rect) -> Rect | None:
        """The overlap of the two rectangles, or None if they do not meet."""
        if not self.intersects(other):
            return None
        return Rect._raw(
            max(self._left, other._left),
            max(self._top, other._top),
            min(self._right, other._right),
            min(self._bottom, other._bottom),
        )

    def united(self, other: Rect) -> Rect:
        """The smallest rectangle enclosing both."""
        return Rect._raw(
            min(self._left, other._left),
            min(self._top, other._top),
            max(self._right, other._right),
            max(self._bottom, other._bottom),
        )

    def adjust(self, left: Any, top: Any, right: Any, bottom: Any) -> None:
        """Add the offsets to each edge, then normalize."""
        self._left += left
        self._top += top
        self._right += right
        self._bottom += bottom
        self.normalize()

    def center(self) -> Point:
        return Point(
            _div(self._right + self._left, 2),
            _div(self._bottom + self._top, 2),
        )

    def __and__(self, other: object) -> Rect | None:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.intersected(other)

    def __or__(self, other: object) -> Rect:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.united(other)