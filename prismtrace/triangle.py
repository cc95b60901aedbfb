"""Flat triangles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.matrix import rotate_euler
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D

# Machine epsilon of single-precision floats.
_EPSILON = 2.0**-23


@dataclass(eq=False)
class Triangle(Primitive):
    """A triangle with a single face normal, intersected with Möller-Trumbore."""

    v0: Point3D
    v1: Point3D
    v2: Point3D
    material: Optional[Material] = None
    normal: Vector3D = field(init=False, default_factory=Vector3D)

    def __post_init__(self) -> None:
        n = (self.v1 - self.v0).cross(self.v2 - self.v0)
        length = n.length()
        self.normal = n / length if length else n

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        pvec = ray.direction.cross(edge2)
        det = edge1.dot(pvec)
        if -_EPSILON < det < _EPSILON:
            return None
        inv_det = 1.0 / det
        tvec = ray.origin - self.v0
        u = inv_det * tvec.dot(pvec)
        if u < 0.0 or u > 1.0:
            return None
        qvec = tvec.cross(edge1)
        v = inv_det * ray.direction.dot(qvec)
        if v < 0.0 or u + v > 1.0:
            return None
        t = inv_det * edge2.dot(qvec)
        if t > _EPSILON and ray_t.surrounds(t):
            return HitRecord(t=t, p=ray.at(t), normal=self.normal, material=self.material)
        return None

    def translate(self, offset: Vector3D) -> None:
        self.v0 = self.v0 + offset
        self.v1 = self.v1 + offset
        self.v2 = self.v2 + offset

    def rotate(self, degrees: Vector3D) -> None:
        """Rotate vertices and normal about X, Y then Z by angles in degrees."""
        self.v0 = rotate_euler(self.v0, degrees)
        self.v1 = rotate_euler(self.v1, degrees)
        self.v2 = rotate_euler(self.v2, degrees)
        self.normal = rotate_euler(self.normal, degrees)

    def bounding_box(self) -> AABB:
        corners = tuple(zip(self.v0, self.v1, self.v2))
        return AABB(Point3D(*map(min, corners)), Point3D(*map(max, corners)))

    def centroid(self) -> Point3D:
        return (self.v0 + self.v1 + self.v2) / 3