import json

from prismtrace.camera import Camera
from prismtrace.cli import Application, apply_key, main
from prismtrace.vector import Point3D

MATERIAL = {"material": "BaseMaterial", "color": {"r": 0.5, "g": 0.5, "b": 0.5}}


def scene_file(tmp_path, width=8):
    data = {
        "camera": {
            "resolution": {"width": width, "height": 4},
            "RayPerPixel": 1,
            "MaxBounces": 2,
            "BackgroundColor": {"r": 0.2, "g": 0.2, "b": 0.2},
            "fieldOfView": 60,
            "position": {"x": 0, "y": 0, "z": 0},
            "rotation": {"x": 0, "y": 0, "z": -1},
            "DefocusAngle": 0,
        },
        "scenes": [],
        "primitives": {
            "spheres": [
                {"position": {"x": 0, "y": 0, "z": -3}, "radius": 1, "material": MATERIAL}
            ],
            "triangles": [],
            "planes": [],
            "objects": [],
            "cones": [],
            "cylinders": [],
        },
    }
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_move_key():
    camera = Camera()
    assert apply_key(camera, "up") is True
    assert camera.origin == Point3D(0, 0, -0.5)


def test_turn_key():
    camera = Camera()
    before = camera.lookat
    assert apply_key(camera, "j") is True
    assert camera.lookat == before + Point3D(-0.5, 0, 0)


def test_zoom_keys():
    camera = Camera()
    start = camera.vfov
    apply_key(camera, "add")
    assert camera.vfov == start - 1
    apply_key(camera, "subtract")
    apply_key(camera, "subtract")
    assert camera.vfov == start + 1


def test_escape_and_unknown_do_nothing():
    camera = Camera()
    assert apply_key(camera, "escape") is False
    assert apply_key(camera, None) is False
    assert camera.origin == Camera().origin


def test_main_without_scene(capsys):
    assert main([]) == 84
    err = capsys.readouterr().err
    assert "Scene file not found" in err
    assert "Usage:" in err


def test_main_help():
    assert main(["-h"]) == 84


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.json")]) == 84


def test_arg_parse_sets_scene(tmp_path):
    path = scene_file(tmp_path)
    app = Application([path, "-o", "x.ppm"])
    assert app.arg_parse() is True
    assert app.params.scene_file == path
    assert app.params.output_file == "x.ppm"


def test_main_renders_ppm(tmp_path):
    out = tmp_path / "out.ppm"
    assert main([scene_file(tmp_path), "-o", str(out)]) == 0
    lines = out.read_text(encoding="ascii").splitlines()
    assert lines[0] == "P3"
    width, height = (int(v) for v in lines[1].split())
    assert width == 8
    assert lines[2] == "255"
    assert len(lines) - 3 == width * height
    assert all(0 <= int(v) <= 255 for line in lines[3:] for v in line.split())