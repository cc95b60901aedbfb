import pytest

from prismtrace.arguments import ArgumentsLoader, HelpArgument, MissingArgument, Parameters


def parsed(*argv):
    loader = ArgumentsLoader()
    loader.parse(list(argv))
    return loader


def test_flags_and_positionals():
    loader = parsed("scene.json", "-o", "out.ppm", "-gui")
    assert loader.get(0) == "scene.json"
    assert loader.get("o") == "out.ppm"
    assert loader.get("gui") == ""
    assert loader.has(0) and not loader.has(1)


def test_flag_followed_by_flag_has_empty_value():
    loader = parsed("-a", "-b", "x")
    assert loader.get("a") == ""
    assert loader.get("b") == "x"


def test_empty_string_after_flag_is_value():
    loader = parsed("-o", "", "scene.json")
    assert loader.get("o") == ""
    assert loader.get(0) == "scene.json"


def test_missing_flag_raises():
    with pytest.raises(MissingArgument, match="Argument not found"):
        parsed("a").get("nope")


def test_missing_positional_raises():
    with pytest.raises(MissingArgument, match="Positional argument not found"):
        parsed("-x").get(0)


def test_set_remove_clear():
    loader = parsed("file", "-k", "v")
    loader.set("k", "w")
    assert loader.get("k") == "w"
    loader.remove("k")
    assert not loader.has("k")
    loader.clear()
    assert not loader.has(0)


def test_visit_order():
    loader = parsed("-z", "1", "first", "-a", "2", "second")
    seen = []
    loader.visit(lambda key, value: seen.append((key, value)))
    assert seen == [("", "first"), ("", "second"), ("a", "2"), ("z", "1")]


def test_str_listing():
    loader = parsed("scene.json", "-o", "out.ppm")
    assert str(loader) == (
        "Positional parameters:\n0 => scene.json\nFlag parameters:\no => out.ppm\n"
    )


def test_parameters_default_output():
    params = Parameters()
    params.load(["scene.json"])
    assert params.scene_file == "scene.json"
    assert params.output_file == "output.bmp"
    assert params.gui is False


def test_parameters_gui_has_no_default_output():
    params = Parameters()
    params.load(["scene.json", "-gui"])
    assert params.gui is True
    assert params.output_file == ""


def test_short_output_overrides_long():
    params = Parameters()
    params.load(["scene.json", "-out", "a.ppm", "-o", "b.ppm"])
    assert params.output_file == "b.ppm"


def test_help_raises():
    with pytest.raises(HelpArgument):
        Parameters().load(["-h"])


def test_missing_scene_raises():
    with pytest.raises(MissingArgument, match="Scene file not found"):
        Parameters().load(["-o", "x.ppm"])