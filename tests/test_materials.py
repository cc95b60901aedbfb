import pytest

from prismtrace import rng
from prismtrace.color import Color
from prismtrace.hit import HitRecord
from prismtrace.materials import BaseMaterial, LightMaterial, Material, MetalMaterial
from prismtrace.ray import Ray
from prismtrace.textures import CheckerTexture
from prismtrace.vector import Vector3D

GREY = Color(0.5, 0.5, 0.5)


@pytest.fixture
def record():
    return HitRecord(p=Vector3D(1, 0, 2), normal=Vector3D(0, 1, 0), t=1.0)


def test_plain_material_is_dark_and_absorbs(record):
    material = Material()
    assert material.emitted(0, 0, Vector3D()) == Color(0, 0, 0)
    assert material.scatter(Ray(Vector3D(), Vector3D(0, -1, 0)), record) is None


def test_base_material_scatters_from_hit_point(record):
    rng.seed(42)
    material = BaseMaterial(GREY)
    for _ in range(20):
        result = material.scatter(Ray(Vector3D(), Vector3D(0, -1, 0)), record)
        assert result is not None
        attenuation, scattered = result
        assert attenuation == GREY
        assert scattered.origin == record.p
        assert not scattered.direction.near_zero()
        assert scattered.direction.dot(record.normal) >= 0


def test_base_material_uses_texture(record):
    texture = CheckerTexture(Color(1, 0, 0), Color(0, 0, 1))
    material = BaseMaterial(texture)
    attenuation, _ = material.scatter(Ray(Vector3D(), Vector3D(0, -1, 0)), record)
    assert attenuation == texture.value(record.u, record.v, record.p)


def test_light_emits_scaled_color(record):
    light = LightMaterial(GREY, intensity=4.0)
    assert light.emitted(0, 0, Vector3D()) == GREY * 4.0
    assert light.scatter(Ray(Vector3D(), Vector3D(0, -1, 0)), record) is None


def test_light_default_intensity():
    light = LightMaterial(GREY)
    assert light.emitted(0.2, 0.4, Vector3D(3, 3, 3)) == GREY


def test_metal_fuzz_is_clamped():
    assert MetalMaterial(GREY, 5.0).fuzz == 1.0
    assert MetalMaterial(GREY, 0.25).fuzz == 0.25


def test_perfect_mirror_reflects(record):
    metal = MetalMaterial(GREY, 0.0)
    incoming = Ray(Vector3D(0, 1, 0), Vector3D(1, -1, 0))
    attenuation, scattered = metal.scatter(incoming, record)
    assert attenuation == GREY
    assert tuple(scattered.direction) == pytest.approx(tuple(Vector3D(1, 1, 0).unit()))


def test_metal_absorbs_rays_leaving_the_surface(record):
    metal = MetalMaterial(GREY, 0.0)
    outgoing = Ray(Vector3D(), Vector3D(0, 1, 0))
    assert metal.scatter(outgoing, record) is None