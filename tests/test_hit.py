from prismtrace.hit import HitRecord
from prismtrace.ray import Ray
from prismtrace.vector import Vector3D


def test_front_face_keeps_normal():
    rec = HitRecord()
    ray = Ray(Vector3D(0, 0, 5), Vector3D(0, 0, -1))
    outward = Vector3D(0, 0, 1)
    rec.set_face_normal(ray, outward)
    assert rec.front_face is True
    assert rec.normal == outward


def test_back_face_flips_normal():
    rec = HitRecord()
    ray = Ray(Vector3D(0, 0, 0), Vector3D(0, 0, 1))
    outward = Vector3D(0, 0, 1)
    rec.set_face_normal(ray, outward)
    assert rec.front_face is False
    assert rec.normal == -outward


def test_perpendicular_ray_counts_as_back_face():
    rec = HitRecord()
    ray = Ray(Vector3D(), Vector3D(1, 0, 0))
    outward = Vector3D(0, 1, 0)
    rec.set_face_normal(ray, outward)
    assert rec.front_face is False
    assert rec.normal == Vector3D(0, -1, 0)


def test_defaults_are_independent():
    first = HitRecord()
    second = HitRecord()
    first.t = 3.0
    assert second.t == 0.0
    assert first.material is None