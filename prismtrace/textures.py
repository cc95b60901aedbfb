"""Textures giving a colour at a surface point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from prismtrace.color import Color
from prismtrace.vector import Point3D


class Texture(ABC):
    """A colour source evaluated at surface coordinates."""

    @abstractmethod
    def value(self, u: float, v: float, point: Point3D) -> Color:
        """Colour at texture coordinates ``(u, v)`` and position ``point``."""


class SolidColorTexture(Texture):
    """The same colour everywhere."""

    def __init__(self, color: Color) -> None:
        self.color = color

    def value(self, u: float, v: float, point: Point3D) -> Color:
        return self.color


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColorTexture(source)


class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two textures."""

    def __init__(self, odd: Texture | Color, even: Texture | Color, scale: float = 1.0) -> None:
        self.odd = _as_texture(odd)
        self.even = _as_texture(even)
        self._inv_scale = 1.0 / scale

    def value(self, u: float, v: float, point: Point3D) -> Color:
        cells = sum(math.floor(self._inv_scale * c) for c in point)
        if cells % 2 == 0:
            return self.odd.value(u, v, point)
        return self.even.value(u, v, point)