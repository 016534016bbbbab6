"""Two- and three-component vectors with arithmetic operators."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


def _divide(value: Real, scalar: Real) -> Real:
    """Divide like a typed vector would: integers truncate toward zero."""
    if isinstance(value, int) and isinstance(scalar, int):
        if scalar == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(value) // abs(scalar)
        return quotient if (value >= 0) == (scalar >= 0) else -quotient
    return value / scalar


def _type_name(value: Real) -> str:
    return type(value).__name__


@dataclass(frozen=True, slots=True)
class Vector2:
    """A 2D vector."""

    x: Real = 0
    y: Real = 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Real) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Real) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(_divide(self.x, scalar), _divide(self.y, scalar))

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"Vector2<{_type_name(self.x)}>({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3D vector."""

    x: Real = 0
    y: Real = 0
    z: Real = 0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Real) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: Real) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(
            _divide(self.x, scalar),
            _divide(self.y, scalar),
            _divide(self.z, scalar),
        )

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"Vector3<{_type_name(self.x)}>({self.x}, {self.y}, {self.z})"