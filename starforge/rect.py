"""Axis-aligned rectangles that allow negative dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from starforge.vector import Vector2


@dataclass(frozen=True, slots=True)
class Rect:
    """A rectangle given by its left/top corner and its width/height."""

    left: Real = 0
    top: Real = 0
    width: Real = 0
    height: Real = 0

    @classmethod
    def from_vectors(cls, position: Vector2, size: Vector2) -> Rect:
        return cls(position.x, position.y, size.x, size.y)

    def _bounds(self) -> tuple[Real, Real, Real, Real]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            max(self.left, right),
            min(self.top, bottom),
            max(self.top, bottom),
        )

    def contains(self, *args) -> bool:
        """Test a point, given as a ``Vector2`` or as ``x, y``."""
        if len(args) == 1 and isinstance(args[0], Vector2):
            x, y = args[0].x, args[0].y
        elif len(args) == 2:
            x, y = args
        else:
            raise TypeError("contains() takes a Vector2 or two coordinates")
        min_x, max_x, min_y, max_y = self._bounds()
        return min_x <= x < max_x and min_y <= y < max_y

    def find_intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or ``None`` if it is empty."""
        r1_min_x, r1_max_x, r1_min_y, r1_max_y = self._bounds()
        r2_min_x, r2_max_x, r2_min_y, r2_max_y = other._bounds()
        inter_left = max(r1_min_x, r2_min_x)
        inter_top = max(r1_min_y, r2_min_y)
        inter_right = min(r1_max_x, r2_max_x)
        inter_bottom = min(r1_max_y, r2_max_y)
        if inter_left < inter_right and inter_top < inter_bottom:
            return Rect(inter_left, inter_top, inter_right - inter_left, inter_bottom - inter_top)
        return None

    def position(self) -> Vector2:
        return Vector2(self.left, self.top)

    def size(self) -> Vector2:
        return Vector2(self.width, self.height)