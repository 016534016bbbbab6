"""Angles stored in degrees with wrapping and arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

PI = 3.141592654


def positive_remainder(a: float, b: float) -> float:
    """Remainder of ``a / b`` that is always in ``[0, b)``."""
    if not b > 0.0:
        raise ValueError("Cannot calculate remainder with non-positive divisor")
    val = a - float(int(a / b)) * b
    return val if val >= 0.0 else val + b


@dataclass(frozen=True, slots=True, order=True)
class Angle:
    """An angle, kept in degrees."""

    degrees: float = 0.0

    def as_degrees(self) -> float:
        return self.degrees

    def as_radians(self) -> float:
        return self.degrees * (PI / 180)

    def wrap_signed(self) -> Angle:
        """Wrap into ``[-180, 180)``."""
        return Angle(positive_remainder(self.degrees + 180, 360) - 180)

    def wrap_unsigned(self) -> Angle:
        """Wrap into ``[0, 360)``."""
        return Angle(positive_remainder(self.degrees, 360))

    def __float__(self) -> float:
        return float(self.degrees)

    def __neg__(self) -> Angle:
        return Angle(-self.degrees)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees + other.degrees)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees - other.degrees)

    def __mul__(self, factor: float) -> Angle:
        if isinstance(factor, Angle) or not isinstance(factor, Real):
            return NotImplemented
        return Angle(self.degrees * factor)

    def __rmul__(self, factor: float) -> Angle:
        return self.__mul__(factor)

    def __truediv__(self, other):
        """Divide by a number to get an angle, or by an angle to get a ratio."""
        if isinstance(other, Angle):
            return self.degrees / other.degrees
        if not isinstance(other, Real):
            return NotImplemented
        return Angle(self.degrees / other)

    def __mod__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(positive_remainder(self.degrees, other.degrees))


Angle.ZERO = Angle()


def degrees(angle: float) -> Angle:
    """Build an angle from degrees."""
    return Angle(float(angle))


def radians(angle: float) -> Angle:
    """Build an angle from radians."""
    return Angle(angle * (180 / PI))