"""Infinite planes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.matrix import rotate_euler
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D

_X = Vector3D(1, 0, 0)
_Y = Vector3D(0, 1, 0)
_Z = Vector3D(0, 0, 1)


def plane_uv(p: Point3D, normal: Vector3D) -> tuple[float, float]:
    """Project ``p`` onto two axes lying in the plane of ``normal``."""
    a = normal.cross(_X)
    b = normal.cross(_Y)
    max_ab = b if a.dot(a) < a.dot(b) else a
    c = normal.cross(_Z)
    u_vec = (c if max_ab.dot(max_ab) < c.dot(c) else max_ab).unit()
    v_vec = normal.cross(u_vec)
    return u_vec.dot(p), v_vec.dot(p)


@dataclass(eq=False)
class Plane(Primitive):
    """The plane through ``origin`` perpendicular to ``normal``."""

    origin: Point3D
    normal: Vector3D
    material: Optional[Material] = None

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if denom == 0:
            return None
        t = (self.origin - ray.origin).dot(self.normal) / denom
        if t < 0.0 or not ray_t.surrounds(t):
            return None
        rec = HitRecord(t=t, p=ray.at(t), normal=self.normal, material=self.material)
        rec.u, rec.v = plane_uv(rec.p, self.normal)
        return rec

    def translate(self, offset: Vector3D) -> None:
        self.origin = self.origin + offset

    def rotate(self, degrees: Vector3D) -> None:
        """Rotate the normal about X, Y then Z by angles in degrees."""
        self.normal = rotate_euler(self.normal, degrees)

    def bounding_box(self) -> AABB:
        everything = Interval(-sys.float_info.max, sys.float_info.max)
        return AABB.from_intervals(everything, everything, everything)

    def centroid(self) -> Point3D:
        return self.origin