import math

import pytest

from isoscene.errors import DegenerateConfiguration
from isoscene.geometry.dimensions import TileDimensions
from isoscene.utils.iso import (
    cartesian_to_isometric, isometric_to_cartesian, isometric_to_screen, screen_to_cell, to_pixels,
)
from isoscene.utils.point3d import Vector3

TILE = TileDimensions(width=64, height=32, thickness=8)


class _RawTile:
    # sin la validación del dataclass, para probar el chequeo de la transformación
    def __init__(self, width, height):
        self.width = width
        self.height = height


def test_known_projection():
    iso = cartesian_to_isometric(Vector3(2, 1, 0), TILE)
    assert iso.to_tuple() == (32, 48, 0)


def test_height_scales_with_tile_height():
    assert cartesian_to_isometric((0, 0, 4), TILE).z == 128


@pytest.mark.parametrize("p", [
    (0, 0, 0),
    (2, 1, 0),
    (-3.25, 7.5, 1.0),
    (1e6, -1e6, 3.3),
    (0.1, 0.2, -0.3),
])
@pytest.mark.parametrize("tile", [TILE, TileDimensions(width=100, height=37)])
def test_round_trip(p, tile):
    back = isometric_to_cartesian(cartesian_to_isometric(p, tile), tile)
    for got, want in zip(back, p):
        assert got == pytest.approx(want, rel=1e-9, abs=1e-9)


def test_returns_new_vector():
    p = Vector3(1, 2, 3)
    assert cartesian_to_isometric(p, TILE) is not p
    assert p.to_tuple() == (1, 2, 3)


@pytest.mark.parametrize("w,h", [(0, 32), (64, 0), (math.inf, 32), (64, math.nan), (-64, 32)])
def test_degenerate_tile_is_rejected(w, h):
    tile = _RawTile(w, h)
    with pytest.raises(DegenerateConfiguration):
        cartesian_to_isometric((1, 1, 1), tile)
    with pytest.raises(DegenerateConfiguration):
        isometric_to_cartesian((1, 1, 1), tile)


def test_tile_dimensions_validate_on_construction():
    with pytest.raises(DegenerateConfiguration):
        TileDimensions(width=0, height=32)
    with pytest.raises(DegenerateConfiguration):
        TileDimensions(width=64, height=32, thickness=math.inf)


def test_isometric_to_screen_lifts_by_height():
    assert isometric_to_screen((10, 50, 32)) == (10, 18)


@pytest.mark.parametrize("cell", [(0, 0), (3, 1), (1, 6), (5, 5)])
def test_screen_to_cell_picks_tile_center(cell):
    iso = cartesian_to_isometric((cell[0], cell[1], 0), TILE)
    cx, cy = iso.x + TILE.width / 2, iso.y + TILE.height / 2
    assert screen_to_cell(cx, cy, TILE) == cell


def test_to_pixels_applies_scale_then_offset():
    assert to_pixels(10, 20, 2.0, 100, 50) == (120, 90)
    assert to_pixels(10, 20, 1.0) == (10, 20)
