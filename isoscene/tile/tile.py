from typing import List

from isoscene.config.tile import TILE_COLORS, TILE_DIMENSIONS
from isoscene.geometry.panel import Panel
from isoscene.scene_object import SceneObject


def build_tile_panels(tile=TILE_DIMENSIONS, colors=TILE_COLORS) -> List[Panel]:
    """
    Rombo superior (con contorno de margen) + los dos cantos que dan el espesor.
    """
    w, h, t = tile.width, tile.height, tile.thickness

    surface = ((w / 2, 0), (w, h / 2), (w / 2, h), (0, h / 2))
    left_border = ((0, h / 2), (w / 2, h), (w / 2, h + t), (0, h / 2 + t))
    right_border = ((w / 2, h), (w, h / 2), (w, h / 2 + t), (w / 2, h + t))

    panels = [Panel(surface, colors.surface, "top", "surface", outline=colors.margin)]
    if t > 0:
        panels.append(Panel(left_border, colors.left_border, "left", "border"))
        panels.append(Panel(right_border, colors.right_border, "right", "border"))
    return panels


class Tile(SceneObject):
    def __init__(self, position, tile=TILE_DIMENSIONS, colors=TILE_COLORS):
        super().__init__(position, build_tile_panels(tile, colors))
