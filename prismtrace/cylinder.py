"""Cylinders around an arbitrary axis."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.matrix import rotate_euler
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D


@dataclass(eq=False)
class Cylinder(Primitive):
    """A cylinder of ``radius`` along the unit ``direction`` from ``origin``.

    A non-positive ``height`` leaves it unbounded.
    """

    origin: Point3D
    direction: Vector3D
    radius: float
    material: Optional[Material]
    height: float

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.origin
        dd = self.direction.dot(ray.direction)
        doc = self.direction.dot(oc)
        a = ray.direction.dot(ray.direction) - dd * dd
        b = 2 * (ray.direction.dot(oc) - dd * doc)
        c = oc.dot(oc) - doc * doc - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0 or a == 0:
            return None
        sqrt_d = math.sqrt(discriminant)
        root = (-b - sqrt_d) / (2 * a)
        if not ray_t.surrounds(root):
            root = (-b + sqrt_d) / (2 * a)
            if not ray_t.surrounds(root):
                return None
        p = ray.at(root)
        relative = p - self.origin
        axial = self.direction.dot(relative)
        if self.height > 0 and (axial < 0 or axial > self.height):
            return None
        radial = relative - self.direction * axial
        length = radial.length()
        normal = radial / length if length else radial
        return HitRecord(t=root, p=p, normal=normal, material=self.material)

    def translate(self, offset: Vector3D) -> None:
        self.origin = self.origin + offset

    def rotate(self, degrees: Vector3D) -> None:
        """Rotate the axis about X, Y then Z by angles in degrees."""
        self.direction = rotate_euler(self.direction, degrees)

    def bounding_box(self) -> AABB:
        return AABB()

    def centroid(self) -> Point3D:
        return self.origin + self.direction * self.height