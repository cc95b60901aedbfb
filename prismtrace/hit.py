"""Records describing where a ray met a surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D

if TYPE_CHECKING:
    from prismtrace.materials import Material


@dataclass
class HitRecord:
    """Details of a ray-surface intersection."""

    p: Point3D = field(default_factory=Point3D)
    normal: Vector3D = field(default_factory=Vector3D)
    material: Optional[Material] = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, ray: Ray, out_normal: Vector3D) -> None:
        """Orient the stored normal against the incoming ray."""
        self.front_face = out_normal.dot(ray.direction) < 0
        self.normal = out_normal if self.front_face else -out_normal