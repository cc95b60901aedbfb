"""Linear RGB colours with float components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from prismtrace.interval import Interval

_INTENSITY = Interval(0.0, 0.999)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour; components are nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        """Scale by a number or multiply component-wise by another colour."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def to_gamma(self) -> Color:
        """Gamma-2 encode; negative components become zero."""
        return Color(*(math.sqrt(c) if c > 0 else 0.0 for c in (self.r, self.g, self.b)))

    def to_linear(self) -> Color:
        """Gamma-2 decode."""
        return Color(self.r * self.r, self.g * self.g, self.b * self.b)

    def clamp(self) -> Color:
        """Clamp every component into ``[0, 0.999]``."""
        return Color(_INTENSITY.clamp(self.r), _INTENSITY.clamp(self.g), _INTENSITY.clamp(self.b))

    def to_rgb8(self) -> tuple[int, int, int]:
        """Byte values of a clamped colour, each component scaled by 256."""
        return int(self.r * 256), int(self.g * 256), int(self.b * 256)