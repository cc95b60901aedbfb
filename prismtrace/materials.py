"""Surface materials: how light is emitted and scattered."""

from __future__ import annotations

from typing import Optional

from prismtrace import rng
from prismtrace.color import Color
from prismtrace.hit import HitRecord
from prismtrace.ray import Ray
from prismtrace.textures import SolidColorTexture, Texture
from prismtrace.vector import Point3D, Vector3D

Scatter = tuple[Color, Ray]


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColorTexture(source)


class Material:
    """A material that neither emits nor scatters light."""

    def emitted(self, u: float, v: float, point: Point3D) -> Color:
        return Color(0, 0, 0)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """Return ``(attenuation, scattered ray)``, or None if the ray is absorbed."""
        return None


class BaseMaterial(Material):
    """Lambertian diffuse material."""

    def __init__(self, texture: Texture | Color) -> None:
        self.texture = _as_texture(texture)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        direction = rec.normal + rng.unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return self.texture.value(rec.u, rec.v, rec.p), Ray(rec.p, direction)


class LightMaterial(Material):
    """An emitter whose colour is scaled by an intensity."""

    def __init__(self, texture: Texture | Color, intensity: float = 1.0) -> None:
        self.texture = _as_texture(texture)
        self.intensity = intensity

    def emitted(self, u: float, v: float, point: Point3D) -> Color:
        return self.texture.value(u, v, point) * self.intensity


class MetalMaterial(Material):
    """A reflective material; ``fuzz`` (at most 1) blurs the reflection."""

    def __init__(self, texture: Texture | Color, fuzz: float) -> None:
        self.texture = _as_texture(texture)
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        reflected = Vector3D.reflect(ray_in.direction, rec.normal)
        reflected = reflected.unit() + rng.unit_vector() * self.fuzz
        scattered = Ray(rec.p, reflected)
        if scattered.direction.dot(rec.normal) <= 0:
            return None
        return self.texture.value(rec.u, rec.v, rec.p), scattered