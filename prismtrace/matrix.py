"""3x3 matrices for rotating vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from prismtrace.vector import Vector3D, degrees_to_radians

Row = tuple[float, float, float]

_IDENTITY: tuple[Row, Row, Row] = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class Matrix3D:
    """An immutable 3x3 matrix stored as three rows."""

    rows: tuple[Row, Row, Row] = _IDENTITY

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a Matrix3D needs exactly 3 rows of 3 values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def rotation(axis: Vector3D, angle: float) -> Matrix3D:
        """Rotation of ``angle`` radians about ``axis`` (assumed unit length)."""
        c = math.cos(angle)
        s = math.sin(angle)
        k = 1 - c
        x, y, z = axis
        return Matrix3D(
            (
                (c + x * x * k, x * y * k - z * s, x * z * k + y * s),
                (y * x * k + z * s, c + y * y * k, y * z * k - x * s),
                (z * x * k - y * s, z * y * k + x * s, c + z * z * k),
            )
        )

    def __mul__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(*(sum(m * v for m, v in zip(row, other)) for row in self.rows))

    def __str__(self) -> str:
        lines = ["Matrix :"]
        lines.extend("| " + "  /  ".join(f"{value:g}" for value in row) for row in self.rows)
        return "\n".join(lines) + "\n"


def _axis_rotations(degrees: Vector3D) -> tuple[Matrix3D, Matrix3D, Matrix3D]:
    x = degrees_to_radians(degrees.x)
    y = degrees_to_radians(degrees.y)
    z = degrees_to_radians(degrees.z)
    mx = Matrix3D(((1, 0, 0), (0, math.cos(x), -math.sin(x)), (0, math.sin(x), math.cos(x))))
    my = Matrix3D(((math.cos(y), 0, math.sin(y)), (0, 1, 0), (-math.sin(y), 0, math.cos(y))))
    mz = Matrix3D(((math.cos(z), -math.sin(z), 0), (math.sin(z), math.cos(z), 0), (0, 0, 1)))
    return mx, my, mz


def rotate_euler(vector: Vector3D, degrees: Vector3D) -> Vector3D:
    """Rotate ``vector`` about X, then Y, then Z by the angles in ``degrees``."""
    mx, my, mz = _axis_rotations(degrees)
    return mz * (my * (mx * vector))