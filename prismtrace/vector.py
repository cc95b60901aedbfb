"""Three-component vectors used for points, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_NEAR_ZERO = 1e-8


def _fmin(a: float, b: float) -> float:
    """Smaller of two floats, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


@dataclass(frozen=True, slots=True)
class Vector3D:
    """An immutable 3D vector; also used to represent points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit(self) -> Vector3D:
        """Return this vector scaled to length one."""
        return self / self.length()

    def near_zero(self) -> bool:
        """True if every component is very close to zero."""
        return all(abs(component) < _NEAR_ZERO for component in self)

    @staticmethod
    def reflect(v: Vector3D, n: Vector3D) -> Vector3D:
        """Reflect ``v`` about the normal ``n``."""
        return v - n * (v.dot(n) * 2)

    @staticmethod
    def minimum(a: Vector3D, b: Vector3D) -> Vector3D:
        """Component-wise minimum of two vectors."""
        return Vector3D(_fmin(a.x, b.x), _fmin(a.y, b.y), _fmin(a.z, b.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        """Scale by a number, or take the cross product with another vector."""
        if isinstance(other, Vector3D):
            return self.cross(other)
        if isinstance(other, Real):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1 / scalar)

    def __str__(self) -> str:
        return f"V({self.x:g}, {self.y:g}, {self.z:g})"


Point3D = Vector3D


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0