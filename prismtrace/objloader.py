"""Loading triangle meshes from Wavefront .obj files."""

from __future__ import annotations

import re
from typing import Callable, Optional, TypeVar

from prismtrace.materials import Material
from prismtrace.mesh import MeshObject, SmoothTriangle
from prismtrace.vector import Point3D, Vector3D

T = TypeVar("T")

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _leading_int(token: str) -> int:
    """Integer at the start of ``token``, ignoring what follows (``"12//4"`` is 12)."""
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"not an integer: {token!r}")
    return int(match.group())


def _leading_float(token: str) -> float:
    """Float at the start of ``token``, ignoring what follows."""
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return float(match.group())


def _three(text: str, line: str, convert: Callable[[str], T]) -> tuple[T, T, T]:
    parts = text.split()
    if len(parts) < 3:
        raise ValueError(f"expected three values in {line!r}")
    first, second, third = (convert(part) for part in parts[:3])
    return first, second, third


def parse_vertex(line: str) -> Point3D:
    """Parse a ``v x y z`` line."""
    return Point3D(*_three(line[2:], line, _leading_float))


def parse_normal(line: str) -> Vector3D:
    """Parse a ``vn x y z`` line."""
    return Vector3D(*_three(line[3:], line, _leading_float))


def parse_index(line: str) -> tuple[int, int, int]:
    """Parse the vertex indices of an ``f a//n b//n c//n`` line."""
    return _three(line[2:], line, _leading_int)


def load_obj(
    filename: str, origin: Point3D, scale: float, material: Optional[Material] = None
) -> MeshObject:
    """Read ``filename`` into a mesh, scaled by ``scale`` and moved to ``origin``."""
    try:
        with open(filename, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise OSError(f"Could not open file: {filename}") from exc

    vertices: list[Point3D] = []
    normals: list[Vector3D] = []
    faces: list[tuple[int, int, int]] = []
    for line in lines:
        if not line or line.startswith("#"):
            continue
        if line.startswith("v "):
            vertices.append(parse_vertex(line))
        elif line.startswith("vn"):
            normals.append(parse_normal(line))
        elif line.startswith("f"):
            faces.append(parse_index(line))

    if not vertices or not faces or not normals:
        raise ValueError(f"Invalid object file: {filename}")
    print(
        f"Object loaded: {filename}\n"
        f"\tnumber of vertices: {len(vertices)}\n"
        f"\tnumber of normals: {len(normals)}\n"
        f"\tnumber of indices: {len(faces)}"
    )

    mesh = MeshObject(origin, scale, material)
    for face in faces:
        for index in face:
            if index < 1 or index > len(vertices) or index > len(normals):
                raise ValueError(f"Index out of bounds: {index}")
        a, b, c = (vertices[index - 1] * scale + origin for index in face)
        na, nb, nc = (normals[index - 1] for index in face)
        mesh.add_triangle(SmoothTriangle((a, b, c), (na, nb, nc), material))
    mesh.build()
    return mesh