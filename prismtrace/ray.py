"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from prismtrace.vector import Point3D, Vector3D


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin`` going along ``direction``."""

    origin: Point3D = field(default_factory=Point3D)
    direction: Vector3D = field(default_factory=Vector3D)

    def at(self, t: float) -> Point3D:
        """The point reached after travelling ``t`` along the direction."""
        return self.origin + self.direction * t