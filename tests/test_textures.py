import pytest

from prismtrace.color import Color
from prismtrace.textures import CheckerTexture, SolidColorTexture, Texture
from prismtrace.vector import Vector3D

RED = Color(1, 0, 0)
BLUE = Color(0, 0, 1)


def test_solid_color_everywhere():
    texture = SolidColorTexture(RED)
    assert texture.value(0, 0, Vector3D()) == RED
    assert texture.value(0.3, 0.9, Vector3D(10, -4, 2)) == RED


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_checker_even_cell_uses_first_texture():
    checker = CheckerTexture(RED, BLUE)
    assert checker.value(0, 0, Vector3D(0.5, 0.5, 0.5)) == RED


def test_checker_odd_cell_uses_second_texture():
    checker = CheckerTexture(RED, BLUE)
    assert checker.value(0, 0, Vector3D(1.5, 0.5, 0.5)) == BLUE


def test_checker_negative_coordinates():
    checker = CheckerTexture(RED, BLUE)
    assert checker.value(0, 0, Vector3D(-0.5, 0.5, 0.5)) == BLUE
    assert checker.value(0, 0, Vector3D(-0.5, -0.5, 0.5)) == RED


def test_checker_scale_widens_cells():
    checker = CheckerTexture(RED, BLUE, scale=2.0)
    assert checker.value(0, 0, Vector3D(1.5, 0.0, 0.0)) == RED
    assert checker.value(0, 0, Vector3D(2.5, 0.0, 0.0)) == BLUE


def test_checker_accepts_nested_textures():
    inner = CheckerTexture(RED, BLUE)
    outer = CheckerTexture(inner, SolidColorTexture(BLUE), scale=10.0)
    point = Vector3D(1.5, 0.5, 0.5)
    assert outer.value(0, 0, point) == inner.value(0, 0, point)