"""Closed real intervals."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Interval:
    """The range of reals between ``min`` and ``max``."""

    min: float
    max: float

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        """Widen by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    @staticmethod
    def hull(a: Interval, b: Interval) -> Interval:
        """Smallest interval enclosing both ``a`` and ``b``."""
        return Interval(
            a.min if a.min <= b.min else b.min,
            a.max if a.max >= b.max else b.max,
        )

    def __add__(self, displacement):
        if not isinstance(displacement, Real):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    __radd__ = __add__


Interval.EMPTY = Interval(float("inf"), float("-inf"))
Interval.UNIVERSE = Interval(float("-inf"), float("inf"))