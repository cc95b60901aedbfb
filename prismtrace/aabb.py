"""Axis-aligned bounding boxes and the primitive interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.ray import Ray
from prismtrace.vector import Point3D


def _div(numerator: float, denominator: float) -> float:
    """IEEE-style division: a zero denominator gives an infinity or NaN."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.inf if sign > 0 else -math.inf


@dataclass
class AABB:
    """A box spanning ``min`` to ``max`` along each axis."""

    min: Point3D = field(default_factory=Point3D)
    max: Point3D = field(default_factory=Point3D)

    @staticmethod
    def from_intervals(x: Interval, y: Interval, z: Interval) -> AABB:
        return AABB(Point3D(x.min, y.min, z.min), Point3D(x.max, y.max, z.max))

    def hits(self, ray: Ray, closest: float) -> bool:
        """Slab test; the box must be entered before ``closest`` and lie ahead."""
        tmin = -math.inf
        tmax = math.inf
        for axis in range(3):
            origin = ray.origin[axis]
            direction = ray.direction[axis]
            t1 = _div(self.min[axis] - origin, direction)
            t2 = _div(self.max[axis] - origin, direction)
            if axis == 0:
                tmin = min(t1, t2)
                tmax = max(t1, t2)
            else:
                tmin = max(tmin, min(t1, t2))
                tmax = min(tmax, max(t1, t2))
        return tmax >= tmin and tmin < closest and tmax > 0

    def centroid(self) -> Point3D:
        return (self.min + self.max) / 2

    def grow(self, point: Point3D) -> None:
        """Enlarge the box to include ``point``."""
        self.min = Point3D(*(min(a, b) for a, b in zip(self.min, point)))
        self.max = Point3D(*(max(a, b) for a, b in zip(self.max, point)))

    def area(self) -> float:
        """Half the surface area of the box."""
        e = self.max - self.min
        return e.x * e.y + e.y * e.z + e.z * e.x


class Primitive(ABC):
    """Something a ray can hit."""

    @abstractmethod
    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """The intersection within ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """A box enclosing the primitive."""

    @abstractmethod
    def centroid(self) -> Point3D:
        """A representative centre point."""