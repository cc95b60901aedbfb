"""Building colours, textures, materials and cameras from scene nodes."""

from __future__ import annotations

from typing import Any, Optional

from prismtrace.camera import Camera
from prismtrace.color import Color
from prismtrace.materials import BaseMaterial, LightMaterial, Material, MetalMaterial
from prismtrace.scene_file import get_optional, get_path
from prismtrace.textures import CheckerTexture, SolidColorTexture, Texture
from prismtrace.vector import Point3D, Vector3D


def _value(node: Any, path: str) -> Any:
    value = get_path(node, path)
    if isinstance(value, (dict, list)):
        raise ValueError(f"node '{path}' holds no value")
    return value


def _to_float(value: Any, path: str) -> float:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"conversion of data to type float failed ({path})")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"conversion of data to type float failed ({path})") from exc


def _float(node: Any, path: str) -> float:
    return _to_float(_value(node, path), path)


def _int(node: Any, path: str) -> int:
    value = _value(node, path)
    if isinstance(value, bool):
        raise ValueError(f"conversion of data to type int failed ({path})")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"conversion of data to type int failed ({path})") from exc
    raise ValueError(f"conversion of data to type int failed ({path})")


def _str(node: Any, path: str) -> str:
    value = _value(node, path)
    return value if isinstance(value, str) else str(value)


def _optional_float(node: Any, path: str, default: float) -> float:
    value = get_optional(node, path)
    if value is None or isinstance(value, (dict, list)):
        return default
    try:
        return _to_float(value, path)
    except ValueError:
        return default


def create_color(node: Any) -> Color:
    """A colour from a node with ``r``, ``g`` and ``b``."""
    return Color(_float(node, "r"), _float(node, "g"), _float(node, "b"))


def create_point(node: Any) -> Point3D:
    """A point from a node with ``x``, ``y`` and ``z``."""
    return Point3D(_float(node, "x"), _float(node, "y"), _float(node, "z"))


def create_vector(node: Any) -> Vector3D:
    """A vector from a node with ``x``, ``y`` and ``z``."""
    return Vector3D(_float(node, "x"), _float(node, "y"), _float(node, "z"))


def _texture_or_color(node: Any) -> Texture:
    nested = get_optional(node, "texture")
    if nested is not None:
        return create_texture(nested)
    return create_color_texture(node)


def create_texture(node: Any) -> Texture:
    """A texture chosen by the node's ``type``: ``color`` or ``checker``."""
    kind = _str(node, "type")
    if kind == "color":
        return create_color_texture(node)
    if kind == "checker":
        return create_checker_texture(node)
    raise ValueError(f"Unknown texture type: {kind}")


def create_checker_texture(node: Any) -> CheckerTexture:
    odd = get_path(node, "oddTexture")
    even = get_path(node, "evenTexture")
    scale = _float(node, "scale")
    return CheckerTexture(_texture_or_color(odd), _texture_or_color(even), scale)


def create_color_texture(node: Any) -> SolidColorTexture:
    return SolidColorTexture(create_color(get_path(node, "color")))


def create_material(node: Any) -> Optional[Material]:
    """A material named by the node's ``material``; None for an unknown name."""
    kind = _str(node, "material")
    texture = _texture_or_color(node)
    if kind == "BaseMaterial":
        return BaseMaterial(texture)
    if kind == "LightMaterial":
        return LightMaterial(texture, _optional_float(node, "intensity", 1.0))
    if kind == "MetalMaterial":
        return MetalMaterial(texture, _float(node, "fuzz"))
    return None


def create_camera(node: Any) -> Camera:
    """A camera from a scene's ``camera`` node."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=_int(node, "resolution.width"),
        samples_per_pixel=_int(node, "RayPerPixel"),
        max_depth=_int(node, "MaxBounces"),
        background=create_color(get_path(node, "BackgroundColor")),
        vfov=_float(node, "fieldOfView"),
        origin=create_point(get_path(node, "position")),
        lookat=create_point(get_path(node, "rotation")),
        brightness=_optional_float(node, "brightness", 1.0),
        vup=Vector3D(0, 1, 0),
        defocus_angle=_float(node, "DefocusAngle"),
    )