"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D


@dataclass(eq=False)
class Sphere(Primitive):
    """A sphere; a negative radius is treated as zero."""

    center: Point3D
    radius: float
    material: Optional[Material] = None

    def __post_init__(self) -> None:
        self.radius = max(0.0, float(self.radius))

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        if a == 0 or self.radius == 0:
            return None
        b = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)
        root = (b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None
        rec = HitRecord(t=root, p=ray.at(root), material=self.material)
        outward = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward)
        rec.u, rec.v = Sphere.sphere_uv(outward)
        return rec

    @staticmethod
    def sphere_uv(p: Vector3D) -> tuple[float, float]:
        """Texture coordinates of a point on the unit sphere."""
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def translate(self, offset: Vector3D) -> None:
        self.center = self.center + offset

    def bounding_box(self) -> AABB:
        r = Vector3D(self.radius, self.radius, self.radius)
        return AABB(self.center - r, self.center + r)

    def centroid(self) -> Point3D:
        return self.center