from typing import List

from isoscene.config.cube import CUBE_FACE_COLORS
from isoscene.config.tile import TILE_DIMENSIONS
from isoscene.geometry.panel import Panel
from isoscene.scene_object import SceneObject


def build_cube_panels(size: float, colors=CUBE_FACE_COLORS,
                      tile=TILE_DIMENSIONS) -> List[Panel]:
    """
    Cubo isométrico de arista `size` px, apoyado en el centro de su celda.
    Mismo 2:1 que el tile: media diagonal horizontal = size, vertical = size/2.
    """
    cx, cy = tile.width / 2, tile.height / 2   # centro del rombo de la celda
    a, b, v = size, size / 2, size

    top = ((cx, cy - v - b), (cx + a, cy - v), (cx, cy - v + b), (cx - a, cy - v))
    left = ((cx - a, cy - v), (cx, cy - v + b), (cx, cy + b), (cx - a, cy))
    right = ((cx + a, cy - v), (cx + a, cy), (cx, cy + b), (cx, cy - v + b))

    return [
        Panel(top, colors.top, "top", "face"),
        Panel(left, colors.left, "left", "face"),
        Panel(right, colors.right, "right", "face"),
    ]


class Cube(SceneObject):
    def __init__(self, position, size: float, colors=CUBE_FACE_COLORS, tile=TILE_DIMENSIONS):
        self.size = size
        super().__init__(position, build_cube_panels(size, colors, tile))
