import pytest

from prismtrace.interval import Interval
from prismtrace.materials import BaseMaterial
from prismtrace.color import Color
from prismtrace.mesh import MeshObject
from prismtrace.objloader import load_obj, parse_index, parse_normal, parse_vertex
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D

OBJ = """# a single triangle
v 0 0 0
v 1 0 0
v 0 1 0
vt 0.5 0.5
vn 0 0 1
vn 0 0 1
vn 0 0 1

f 1//1 2//2 3//3
"""


def _write(tmp_path, text, name="model.obj"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_parse_index_takes_vertex_part():
    assert parse_index("f 390//1621 1928//1615 1310//1622") == (390, 1928, 1310)


def test_parse_vertex():
    assert parse_vertex("v 1.5 -2 3") == Vector3D(1.5, -2.0, 3.0)


def test_parse_normal():
    assert parse_normal("vn 0 1 0.5") == Vector3D(0.0, 1.0, 0.5)


def test_parse_vertex_missing_value():
    with pytest.raises(ValueError):
        parse_vertex("v 1 2")


def test_parse_index_rejects_garbage():
    with pytest.raises(ValueError):
        parse_index("f a b c")


def test_load_counts_triangles(tmp_path):
    mesh = load_obj(_write(tmp_path, OBJ), Point3D(0, 0, 0), 1.0)
    assert isinstance(mesh, MeshObject)
    assert len(mesh.triangles) == 1


def test_load_applies_scale_and_origin(tmp_path):
    origin = Point3D(0, 0, 5)
    mesh = load_obj(_write(tmp_path, OBJ), origin, 2.0)
    vertices = mesh.triangles[0].vertices
    assert vertices[0] == origin
    assert vertices[1] == Vector3D(1, 0, 0) * 2.0 + origin


def test_loaded_mesh_is_hit_with_material(tmp_path):
    material = BaseMaterial(Color(0.5, 0.5, 0.5))
    mesh = load_obj(_write(tmp_path, OBJ), Point3D(0, 0, 0), 1.0, material)
    rec = mesh.hits(Ray(Point3D(0.2, 0.2, 1), Vector3D(0, 0, -1)), Interval(0.001, float("inf")))
    assert rec is not None
    assert rec.material is material
    assert rec.normal == Vector3D(0, 0, 1)
    assert rec.t == pytest.approx(1.0)


def test_missing_file(tmp_path):
    with pytest.raises(OSError, match="Could not open file"):
        load_obj(str(tmp_path / "absent.obj"), Point3D(), 1.0)


def test_file_without_normals_is_invalid(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    with pytest.raises(ValueError, match="Invalid object file"):
        load_obj(_write(tmp_path, text), Point3D(), 1.0)


def test_index_out_of_bounds(tmp_path):
    text = OBJ.replace("f 1//1 2//2 3//3", "f 1//1 2//2 9//3")
    with pytest.raises(ValueError, match="Index out of bounds: 9"):
        load_obj(_write(tmp_path, text), Point3D(), 1.0)


def test_two_faces(tmp_path):
    text = OBJ + "f 3//3 2//2 1//1\n"
    mesh = load_obj(_write(tmp_path, text), Point3D(), 1.0)
    assert len(mesh.triangles) == 2