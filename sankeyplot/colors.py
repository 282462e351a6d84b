"""Color values, interpolation and luminance."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from PIL import ImageColor

from .errors import InvalidColorError

ColorLike = Union["Color", str]


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels and alpha."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def parse(cls, value: ColorLike) -> Color:
        """Parse a hex string or CSS color name into a Color.

        Accepts ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb(...)`` and named
        colors (anything Pillow's ImageColor understands). Color instances are
        returned unchanged.
        """
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            raise InvalidColorError(value)
        try:
            red, green, blue, alpha = ImageColor.getcolor(value.strip(), "RGBA")
        except ValueError as exc:
            raise InvalidColorError(value) from exc
        return cls(red, green, blue, alpha)

    @property
    def hex(self) -> str:
        """The color as ``#rrggbb``, without alpha."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def opacity(self) -> float:
        return self.alpha / 255

    def with_alpha(self, alpha: int) -> Color:
        return replace(self, alpha=_clamp_channel(alpha))

    def with_opacity(self, opacity: float) -> Color:
        return replace(self, alpha=_clamp_channel(round(255 * opacity)))


def lerp(a: Color, b: Color, t: float) -> Color:
    """Linearly interpolate each channel from ``a`` (t=0) to ``b`` (t=1)."""

    def channel(x: int, y: int) -> int:
        return _clamp_channel(x + (y - x) * t)

    return Color(
        channel(a.red, b.red),
        channel(a.green, b.green),
        channel(a.blue, b.blue),
        channel(a.alpha, b.alpha),
    )


def blend(a: Color, b: Color) -> Color:
    """Midpoint of two colors. Symmetric: ``blend(a, b) == blend(b, a)``."""
    return lerp(a, b, 0.5)


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def luminance(color: Color) -> float:
    """Relative luminance in [0, 1], as defined by WCAG."""
    return (
        0.2126 * _linearize(color.red)
        + 0.7152 * _linearize(color.green)
        + 0.0722 * _linearize(color.blue)
    )


# Material palette defaults
BLUE = Color(0x21, 0x96, 0xF3)
GREY = Color(0x9E, 0x9E, 0x9E)
YELLOW = Color(0xFF, 0xEB, 0x3B)
WHITE = Color(0xFF, 0xFF, 0xFF)
BLACK = Color(0x00, 0x00, 0x00)
