import math

import pytest

from prismtrace.interval import Interval
from prismtrace.ray import Ray
from prismtrace.sphere import Sphere
from prismtrace.vector import Point3D, Vector3D
from prismtrace.world import World


def _spheres():
    return [
        Sphere(Point3D(0, 0, -8), 1.0),
        Sphere(Point3D(0, 0, -4), 1.0),
        Sphere(Point3D(0, 0, -12), 2.0),
    ]


def test_empty_world_hits_nothing():
    world = World()
    ray = Ray(Point3D(0, 0, 0), Vector3D(0, 0, -1))
    assert world.hits(ray, Interval(0.001, math.inf)) is None


def test_hits_returns_nearest():
    spheres = _spheres()
    world = World()
    for sphere in spheres:
        world.add_primitive(sphere)
    ray = Ray(Point3D(0, 0, 0), Vector3D(0, 0, -1))
    interval = Interval(0.001, math.inf)
    rec = world.hits(ray, interval)
    expected = min(s.hits(ray, interval).t for s in spheres)
    assert rec.t == pytest.approx(expected)


def test_hits_respects_interval_max():
    world = World(_spheres())
    ray = Ray(Point3D(0, 0, 0), Vector3D(0, 0, -1))
    near = Sphere(Point3D(0, 0, -4), 1.0).hits(ray, Interval(0.001, math.inf))
    assert world.hits(ray, Interval(0.001, near.t * 0.5)) is None


def test_miss_returns_none():
    world = World(_spheres())
    ray = Ray(Point3D(0, 0, 0), Vector3D(0, 1, 0))
    assert world.hits(ray, Interval(0.001, math.inf)) is None


def test_clear_removes_everything():
    world = World(_spheres())
    world.clear()
    assert len(world) == 0
    ray = Ray(Point3D(0, 0, 0), Vector3D(0, 0, -1))
    assert world.hits(ray, Interval(0.001, math.inf)) is None


def test_bounding_box_encloses_all():
    spheres = _spheres()
    world = World(spheres)
    box = world.bounding_box()
    for sphere in spheres:
        inner = sphere.bounding_box()
        assert all(a <= b for a, b in zip(box.min, inner.min))
        assert all(a <= b for a, b in zip(inner.max, box.max))


def test_centroid_is_average():
    spheres = _spheres()
    world = World(spheres)
    centroid = world.centroid()
    assert centroid.z == pytest.approx(sum(s.center.z for s in spheres) / len(spheres))
    assert centroid.x == pytest.approx(0.0)


def test_centroid_of_empty_world_raises():
    with pytest.raises(ValueError):
        World().centroid()