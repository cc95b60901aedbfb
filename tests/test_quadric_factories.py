import pytest

from prismtrace.materials import BaseMaterial
from prismtrace.matrix import rotate_euler
from prismtrace.quadric_factories import create_cone, create_cylinder
from prismtrace.vector import Point3D, Vector3D, degrees_to_radians

MATERIAL = {"material": "BaseMaterial", "color": {"r": 0.5, "g": 0.5, "b": 0.5}}


def cone_node(**extra):
    node = {
        "tip": {"x": 1, "y": 2, "z": 3},
        "direction": {"x": 0, "y": 1, "z": 0},
        "height": 4,
        "angle": 30,
        "material": dict(MATERIAL),
    }
    node.update(extra)
    return node


def cylinder_node(**extra):
    node = {
        "position": {"x": 1, "y": 2, "z": 3},
        "direction": {"x": 0, "y": 1, "z": 0},
        "radius": 2,
        "height": 5,
        "material": dict(MATERIAL),
    }
    node.update(extra)
    return node


def test_cone_fields():
    cone = create_cone(cone_node())
    assert cone.tip == Point3D(1, 2, 3)
    assert cone.direction == Vector3D(0, 1, 0)
    assert cone.height == 4
    assert cone.angle == pytest.approx(degrees_to_radians(30))
    assert isinstance(cone.material, BaseMaterial)


def test_cone_translation_and_rotation():
    node = cone_node(
        transformations={
            "translation": {"x": 1, "y": 1, "z": 1},
            "rotation": {"x": 90, "y": 0, "z": 0},
        }
    )
    cone = create_cone(node)
    assert cone.tip == Point3D(1, 2, 3) + Point3D(1, 1, 1)
    assert cone.direction == Vector3D(0, 1, 0)


def test_cone_missing_height():
    node = cone_node()
    del node["height"]
    with pytest.raises(KeyError):
        create_cone(node)


def test_cylinder_fields():
    cylinder = create_cylinder(cylinder_node())
    assert cylinder.origin == Point3D(1, 2, 3)
    assert cylinder.radius == 2
    assert cylinder.height == 5
    assert isinstance(cylinder.material, BaseMaterial)


def test_cylinder_rotation():
    node = cylinder_node(transformations={"rotation": {"x": 90, "y": 0, "z": 0}})
    cylinder = create_cylinder(node)
    assert cylinder.direction == rotate_euler(Vector3D(0, 1, 0), Vector3D(90, 0, 0))


def test_cylinder_requires_material_name():
    node = cylinder_node(material={"color": {"r": 1, "g": 1, "b": 1}})
    with pytest.raises(KeyError):
        create_cylinder(node)


def test_unknown_material_gives_none():
    node = cylinder_node(material={"material": "Glass", "color": {"r": 1, "g": 1, "b": 1}})
    assert create_cylinder(node).material is None