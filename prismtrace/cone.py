"""Cones opening along the Y axis."""

from __future__ import annotations

import math
from typing import Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D, degrees_to_radians


class Cone(Primitive):
    """A cone with its apex at ``tip``; ``angle`` is the half-angle in degrees.

    The surface is solved about the Y axis; ``direction`` selects the nappe
    and measures the height. A non-positive ``height`` leaves it unbounded.
    """

    def __init__(
        self,
        tip: Point3D,
        height: float,
        direction: Vector3D,
        material: Optional[Material] = None,
        angle: float = 45.0,
    ) -> None:
        self.tip = tip
        self.height = height
        self.direction = direction
        self.material = material
        self.angle = degrees_to_radians(angle)

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        d = ray.direction
        oc = ray.origin - self.tip
        k = math.tan(self.angle) ** 2
        a = d.x * d.x + d.z * d.z - k * d.y * d.y
        b = 2 * (oc.x * d.x + oc.z * d.z - k * oc.y * d.y)
        c = oc.x * oc.x + oc.z * oc.z - k * oc.y * oc.y
        discriminant = b * b - 4 * a * c
        if discriminant < 0 or a == 0:
            return None
        sqrt_d = math.sqrt(discriminant)
        root = (-b - sqrt_d) / (2 * a)
        if not ray_t.contains(root):
            root = (-b + sqrt_d) / (2 * a)
            if not ray_t.contains(root):
                return None
        p = ray.at(root)
        axial = (p - self.tip).dot(self.direction)
        if axial <= 0:
            return None
        if self.height > 0 and axial > self.height:
            return None
        return HitRecord(t=root, p=p, normal=(p - self.tip).unit(), material=self.material)

    def translate(self, offset: Vector3D) -> None:
        self.tip = self.tip + offset

    def rotate(self, degrees: Vector3D) -> None:
        """Cones keep their orientation: rotation has no effect."""

    def bounding_box(self) -> AABB:
        return AABB()

    def centroid(self) -> Point3D:
        return self.tip + self.direction * self.height