"""The collection of primitives that make up a scene."""

from __future__ import annotations

from typing import Iterable, Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.ray import Ray
from prismtrace.vector import Point3D

# Largest and smallest positive normal single-precision floats.
_FLT_MAX = 3.4028234663852886e38
_FLT_MIN = 1.1754943508222875e-38


class World(Primitive):
    """A list of primitives intersected as a whole."""

    def __init__(self, primitives: Iterable[Primitive] = ()) -> None:
        self.primitives: list[Primitive] = list(primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self):
        return iter(self.primitives)

    def add_primitive(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    def clear(self) -> None:
        """Remove every primitive."""
        self.primitives.clear()

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """The nearest intersection of ``ray`` within ``ray_t``, or None."""
        best: Optional[HitRecord] = None
        closest = ray_t.max
        for primitive in self.primitives:
            rec = primitive.hits(ray, Interval(ray_t.min, closest))
            if rec is not None:
                best = rec
                closest = rec.t
        return best

    def bounding_box(self) -> AABB:
        low = [_FLT_MAX, _FLT_MAX, _FLT_MAX]
        high = [_FLT_MIN, _FLT_MIN, _FLT_MIN]
        for primitive in self.primitives:
            box = primitive.bounding_box()
            low = [min(a, b) for a, b in zip(low, box.min)]
            high = [max(a, b) for a, b in zip(high, box.max)]
        return AABB(Point3D(*low), Point3D(*high))

    def centroid(self) -> Point3D:
        """Average of the primitives' centroids."""
        if not self.primitives:
            raise ValueError("an empty world has no centroid")
        total = Point3D()
        for primitive in self.primitives:
            total = total + primitive.centroid()
        return total / len(self.primitives)