"""Building spheres, triangles, planes and meshes from scene nodes."""

from __future__ import annotations

from typing import Any, Iterable

from prismtrace.factories import _float, _str, create_material, create_point, create_vector
from prismtrace.mesh import MeshObject
from prismtrace.objloader import load_obj
from prismtrace.plane import Plane
from prismtrace.scene_file import get_optional, get_path
from prismtrace.sphere import Sphere
from prismtrace.triangle import Triangle

_MOVE_AND_TURN = ("translation", "rotation")


def _children(node: Any) -> Iterable[Any]:
    if isinstance(node, list):
        return node
    if isinstance(node, dict):
        return node.values()
    return ()


def _apply_transformations(shape: Any, node: Any, allowed: tuple[str, ...]) -> None:
    transformations = get_optional(node, "transformations")
    if transformations is None:
        return
    for name in allowed:
        value = get_optional(transformations, name)
        if value is None:
            continue
        if name == "translation":
            shape.translate(create_point(value))
        elif name == "rotation":
            shape.rotate(create_point(value))


def create_sphere(node: Any) -> Sphere:
    """A sphere; only translation is applied from its transformations."""
    center = create_point(get_path(node, "position"))
    radius = _float(node, "radius")
    _str(node, "material.material")
    material = create_material(get_path(node, "material"))
    sphere = Sphere(center, radius, material)
    _apply_transformations(sphere, node, ("translation",))
    return sphere


def create_triangle(node: Any) -> Triangle:
    vertices = [create_point(child) for child in _children(get_path(node, "vertices"))]
    if len(vertices) != 3:
        raise ValueError("Triangle must have 3 vertices")
    material = create_material(get_path(node, "material"))
    triangle = Triangle(vertices[0], vertices[1], vertices[2], material)
    _apply_transformations(triangle, node, _MOVE_AND_TURN)
    return triangle


def create_plane(node: Any) -> Plane:
    origin = create_point(get_path(node, "position"))
    normal = create_vector(get_path(node, "normal"))
    _str(node, "material.material")
    material = create_material(get_path(node, "material"))
    plane = Plane(origin, normal, material)
    _apply_transformations(plane, node, _MOVE_AND_TURN)
    return plane


def create_obj(node: Any) -> MeshObject:
    """A mesh loaded from the node's ``filename``."""
    filename = _str(node, "filename")
    origin = create_point(get_path(node, "position"))
    scale = _float(node, "scale")
    material = create_material(get_path(node, "material"))
    return load_obj(filename, origin, scale, material)