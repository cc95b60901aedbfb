"""Building cones and cylinders from scene nodes."""

from __future__ import annotations

from typing import Any

from prismtrace.cone import Cone
from prismtrace.cylinder import Cylinder
from prismtrace.factories import _float, _str, create_material, create_point, create_vector
from prismtrace.scene_file import get_path
from prismtrace.shape_factories import _apply_transformations

_MOVE_AND_TURN = ("translation", "rotation")


def create_cone(node: Any) -> Cone:
    """A cone from a node with ``tip``, ``direction``, ``height``, ``angle`` and ``material``."""
    tip = create_point(get_path(node, "tip"))
    direction = create_vector(get_path(node, "direction"))
    height = _float(node, "height")
    angle = _float(node, "angle")
    material = create_material(get_path(node, "material"))
    cone = Cone(tip, height, direction, material, angle)
    _apply_transformations(cone, node, _MOVE_AND_TURN)
    return cone


def create_cylinder(node: Any) -> Cylinder:
    """A cylinder from a node with ``position``, ``radius``, ``direction``, ``height`` and ``material``."""
    origin = create_point(get_path(node, "position"))
    radius = _float(node, "radius")
    direction = create_vector(get_path(node, "direction"))
    _str(node, "material.material")
    height = _float(node, "height")
    material = create_material(get_path(node, "material"))
    cylinder = Cylinder(origin, direction, radius, material, height)
    _apply_transformations(cylinder, node, _MOVE_AND_TURN)
    return cylinder