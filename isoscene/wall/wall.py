"""
Paredes direccionales.

Una pared tiene hasta dos lados (izquierdo/derecho) y cada lado son tres
cuadriláteros: superficie, borde (espesor vertical) y borde superior (tapa).
Los lados se espejan sobre x = w/2. BOTH = izquierdo + derecho, en ese orden.

Notación: w/h/t = ancho/alto/espesor del tile, H/T = alto/espesor de pared.
"""

from typing import List

from isoscene.config.tile import TILE_DIMENSIONS
from isoscene.config.wall import WALL_COLORS, WALL_DIMENSIONS
from isoscene.geometry.panel import Panel
from isoscene.scene_object import SceneObject
from isoscene.wall.direction import WallDirection


# ---------------------------
# Lado izquierdo
# ---------------------------
def _left_panels(tile, wall, colors) -> List[Panel]:
    w, h, t = tile.width, tile.height, tile.thickness
    H, T = wall.height, wall.thickness

    surface = (
        (0, h / 2 + t),
        (0, -H),
        (w / 2, -H - h / 2),
        (w / 2, t),
    )
    border = (
        (0, h / 2 + t),
        (-T, h / 2 + t - T / 2),
        (-T, -H - T / 2),
        (0, -H),
    )
    border_top = (
        (-T, -H - T / 2),
        (w / 2, -H - h / 2 - T),
        (w / 2, -H - h / 2),
        (0, -H),
    )
    return [
        Panel(surface, colors.left.surface, "left", "surface"),
        Panel(border, colors.left.border, "left", "border"),
        Panel(border_top, colors.left.border_top, "left", "border_top"),
    ]


# ---------------------------
# Lado derecho (espejo)
# ---------------------------
def _right_panels(tile, wall, colors) -> List[Panel]:
    w, h, t = tile.width, tile.height, tile.thickness
    H, T = wall.height, wall.thickness

    surface = (
        (w / 2, t),
        (w / 2, -H - h / 2),
        (w, -H),
        (w, h / 2 + t),
    )
    border = (
        (w, h / 2 + t),
        (w + T, h / 2 + t - T / 2),
        (w + T, -H - T / 2),
        (w, -H),
    )
    border_top = (
        (w / 2, -H - h / 2 - T),
        (w + T, -H - T / 2),
        (w, -H),
        (w / 2, -H - h / 2),
    )
    return [
        Panel(surface, colors.right.surface, "right", "surface"),
        Panel(border, colors.right.border, "right", "border"),
        Panel(border_top, colors.right.border_top, "right", "border_top"),
    ]


def build_wall_panels(direction, tile=TILE_DIMENSIONS, wall=WALL_DIMENSIONS,
                      colors=WALL_COLORS) -> List[Panel]:
    """
    Paneles de una pared en la dirección dada, relativos al ancla.
    Una dirección desconocida lanza InvalidDirection (no hay geometría parcial).
    """
    direction = WallDirection.parse(direction)

    if direction is WallDirection.LEFT:
        return _left_panels(tile, wall, colors)
    if direction is WallDirection.RIGHT:
        return _right_panels(tile, wall, colors)
    return _left_panels(tile, wall, colors) + _right_panels(tile, wall, colors)


class Wall(SceneObject):
    """Pared anclada en una posición isométrica."""

    def __init__(self, position, direction, tile=TILE_DIMENSIONS,
                 wall=WALL_DIMENSIONS, colors=WALL_COLORS):
        self.direction = WallDirection.parse(direction)
        super().__init__(position, build_wall_panels(self.direction, tile, wall, colors))
