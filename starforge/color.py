"""RGBA colours with 8-bit components."""

from __future__ import annotations

from dataclasses import dataclass

MAX_RGBA_VALUE = 255


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour; alpha defaults to fully opaque."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = MAX_RGBA_VALUE

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= MAX_RGBA_VALUE:
                raise ValueError(f"component {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 32-bit ``0xRRGGBBAA`` value."""
        value &= 0xFFFFFFFF
        return cls(
            (value & 0xFF000000) >> 24,
            (value & 0x00FF0000) >> 16,
            (value & 0x0000FF00) >> 8,
            value & 0x000000FF,
        )

    def to_int(self) -> int:
        """Pack into a 32-bit ``0xRRGGBBAA`` value."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.MAGENTA = Color(255, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)