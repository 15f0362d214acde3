import pytest

from isoscene.config.settings import settings_from_dict
from isoscene.core.camera import ViewTransform
from isoscene.debug.overlays import DebugOverlays
from isoscene.scene import Scene
from isoscene.wall.direction import WallDirection


class RecordingRenderer:
    def __init__(self):
        self.polygons = []

    def clear(self, color):
        self.polygons.clear()

    def draw_polygon(self, points, color, width=0):
        self.polygons.append((list(points), color, width))


@pytest.fixture
def scene():
    settings = settings_from_dict({
        "grid": [[2, 1], [3, 0, 4]],
        "cubes": [{"position": [1, 0, 0], "size": 16}],
    })
    return Scene.from_settings(settings)


def test_grid_codes_build_tiles_and_walls(scene):
    assert len(scene.tiles) == 4
    assert [w.direction for w in scene.walls] == [WallDirection.BOTH, WallDirection.LEFT, WallDirection.RIGHT]
    assert len(scene.cubes) == 1
    assert len(scene.drawables()) == 8


def test_wall_shares_anchor_with_its_tile(scene):
    # celda (0, 1): tile y pared LEFT
    tile = scene.tiles[2]
    wall = scene.walls[1]
    assert tile.anchor() == wall.anchor() == (-32, 16)


def test_render_pushes_every_panel(scene):
    r = RecordingRenderer()
    scene.render(r, ViewTransform())
    tile_polys = 4 * (3 + 1)          # 3 paneles + contorno del margen
    wall_polys = 6 + 3 + 3
    cube_polys = 3
    assert len(r.polygons) == tile_polys + wall_polys + cube_polys
    assert all(len(pts) in (4,) for pts, _, _ in r.polygons)


def test_render_applies_view_transform(scene):
    r = RecordingRenderer()
    scene.render(r, ViewTransform(offset_x=100, offset_y=10, scale=2.0))
    first_pts, _, _ = r.polygons[0]
    # primer tile en (0,0): superficie arranca en (32, 0)
    assert first_pts[0] == (100 + 64, 10)


def test_cell_at_with_camera(scene):
    view = ViewTransform(offset_x=200, offset_y=100, scale=2.0)
    # centro de la celda (1, 0): escena (32 + 32, 16 + 16) -> ventana
    assert scene.cell_at(200 + 64 * 2, 100 + 32 * 2, view) == (1, 0)
    # celda vacía (1, 1)
    assert scene.cell_at(200 + 32 * 2, 100 + 48 * 2 + 16, view) is None


def test_invalid_wall_direction_does_not_enter_the_scene(scene):
    from isoscene.errors import InvalidDirection
    before = len(scene.drawables())
    with pytest.raises(InvalidDirection):
        scene.add_wall(0, 0, "up")
    assert len(scene.drawables()) == before


def test_overlay_markers_fade_and_expire():
    overlays = DebugOverlays()
    overlays.add_cell((1, 2), ttl_ms=100)
    r = RecordingRenderer()
    overlays.draw(r, ViewTransform())
    assert len(r.polygons) == 1 and r.polygons[0][2] == 2
    fresh_color = r.polygons[0][1]

    overlays.update(50)
    r2 = RecordingRenderer()
    overlays.draw(r2, ViewTransform())
    assert r2.polygons[0][1] != fresh_color

    overlays.update(60)
    assert overlays.markers == ()


def test_tile_geometry_follows_configured_tile_size():
    settings = settings_from_dict({"tile": {"width": 128, "height": 64, "thickness": 0}, "grid": [[1]], "cubes": []})
    scene = Scene.from_settings(settings)
    surface = scene.tiles[0].panels[0]
    assert surface.points == ((64, 0), (128, 32), (64, 64), (0, 32))
