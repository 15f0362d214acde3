import json

import pytest

from isoscene.config.settings import SceneSettings, load_settings, save_settings, settings_from_dict
from isoscene.config.tile import TILE_DIMENSIONS
from isoscene.errors import DegenerateConfiguration


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("ISOSCENE_DEBUG", raising=False)
    s = load_settings(str(tmp_path / "nope.json"))
    assert s.tile == TILE_DIMENSIONS
    assert s.debug is False


def test_env_var_points_to_config(tmp_path, monkeypatch):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"tile": {"width": 128, "height": 64}}), encoding="utf-8")
    monkeypatch.setenv("ISOSCENE_CONFIG", str(path))
    s = load_settings()
    assert (s.tile.width, s.tile.height) == (128, 64)
    assert s.tile.thickness == TILE_DIMENSIONS.thickness


def test_malformed_json_falls_back(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    s = load_settings(str(path))
    assert s.tile == TILE_DIMENSIONS
    assert "[Config]" in capsys.readouterr().out


def test_degenerate_values_are_not_swallowed(tmp_path):
    path = tmp_path / "zero.json"
    path.write_text(json.dumps({"tile": {"width": 0}}), encoding="utf-8")
    with pytest.raises(DegenerateConfiguration):
        load_settings(str(path))


def test_inverted_zoom_range_is_rejected():
    with pytest.raises(DegenerateConfiguration):
        settings_from_dict({"camera": {"min_zoom": 2.0, "max_zoom": 1.0}})


def test_colors_accept_hex_strings():
    s = settings_from_dict({"wall_colors": {"left": {"surface": "#123456"}}})
    assert s.wall_colors.left.surface == 0x123456
    assert s.wall_colors.right == SceneSettings().wall_colors.right


def test_debug_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ISOSCENE_DEBUG", "1")
    assert load_settings(str(tmp_path / "nope.json")).debug is True


def test_save_then_load(tmp_path):
    original = settings_from_dict({
        "grid": [[1, 2], [0, 3]],
        "cubes": [{"position": [1, 1, 0], "size": 20}],
        "camera": {"min_zoom": 0.5, "max_zoom": 2.0, "sensitivity": 0.002},
    })
    path = tmp_path / "out" / "scene.json"
    save_settings(original, str(path))
    loaded = load_settings(str(path))
    assert loaded.grid == ((1, 2), (0, 3))
    assert loaded.cubes == ({"position": (1, 1, 0), "size": 20},)
    assert (loaded.min_zoom, loaded.max_zoom, loaded.zoom_sensitivity) == (0.5, 2.0, 0.002)
    assert loaded.wall_colors == original.wall_colors


@pytest.mark.parametrize("camera", [
    {"min_zoom": float("nan")},
    {"max_zoom": float("inf")},
    {"sensitivity": float("nan")},
])
def test_non_finite_camera_values_are_rejected(camera):
    with pytest.raises(DegenerateConfiguration):
        settings_from_dict({"camera": camera})


def test_nan_zoom_in_json_file_raises(tmp_path):
    # json acepta los literales NaN / Infinity
    path = tmp_path / "nan.json"
    path.write_text('{"camera": {"min_zoom": NaN}}', encoding="utf-8")
    with pytest.raises(DegenerateConfiguration):
        load_settings(str(path))


@pytest.mark.parametrize("cfg", [
    {"wall_colors": {"left": {"surface": "zz"}}},
    {"tile": 5},
    {"grid": [["a", 1]]},
    {"cubes": [{"size": 10}]},
    {"camera": {"min_zoom": "lejos"}},
])
def test_wrongly_shaped_config_falls_back(tmp_path, capsys, cfg):
    path = tmp_path / "shape.json"
    path.write_text(json.dumps(cfg), encoding="utf-8")
    s = load_settings(str(path))
    assert s.tile == TILE_DIMENSIONS
    assert s.wall_colors == SceneSettings().wall_colors
    assert "[Config]" in capsys.readouterr().out
