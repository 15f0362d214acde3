from typing import List, Optional, Tuple

from isoscene.config.settings import SceneSettings
from isoscene.config.tile import CELL_EMPTY, CELL_WALL_BOTH, CELL_WALL_LEFT, CELL_WALL_RIGHT
from isoscene.cube.cube import Cube
from isoscene.scene_object import SceneObject
from isoscene.tile.tile import Tile
from isoscene.utils.iso import cartesian_to_isometric, screen_to_cell
from isoscene.wall.direction import WallDirection
from isoscene.wall.wall import Wall

CELL_WALLS = {
    CELL_WALL_BOTH: WallDirection.BOTH,
    CELL_WALL_LEFT: WallDirection.LEFT,
    CELL_WALL_RIGHT: WallDirection.RIGHT,
}


class Scene:
    """
    Tiles + paredes + cubos posicionados en la grilla.
    Se dibuja en orden de inserción: tiles y paredes fila por fila, cubos al final.
    """

    def __init__(self, settings: Optional[SceneSettings] = None):
        self.settings = settings or SceneSettings()
        self.tiles: List[Tile] = []
        self.walls: List[Wall] = []
        self.cubes: List[Cube] = []
        self._objects: List[SceneObject] = []
        self._cells = set()

    @classmethod
    def from_settings(cls, settings: Optional[SceneSettings] = None) -> "Scene":
        scene = cls(settings)
        s = scene.settings

        for y, row in enumerate(s.grid):
            for x, code in enumerate(row):
                if code == CELL_EMPTY:
                    continue
                scene.add_tile(x, y)
                if code in CELL_WALLS:
                    scene.add_wall(x, y, CELL_WALLS[code])

        for cfg in s.cubes:
            scene.add_cube(cfg["position"], cfg["size"])

        return scene

    # ---------------------------
    # Armado
    # ---------------------------
    def add_tile(self, x: int, y: int) -> Tile:
        s = self.settings
        tile = Tile(cartesian_to_isometric((x, y, 0), s.tile), s.tile, s.tile_colors)
        self.tiles.append(tile)
        self._objects.append(tile)
        self._cells.add((x, y))
        return tile

    def add_wall(self, x: int, y: int, direction) -> Wall:
        s = self.settings
        # Wall valida la dirección antes de que la pared entre a la escena
        wall = Wall(cartesian_to_isometric((x, y, 0), s.tile), direction,
                    s.tile, s.wall, s.wall_colors)
        self.walls.append(wall)
        self._objects.append(wall)
        return wall

    def add_cube(self, position, size: float) -> Cube:
        s = self.settings
        cube = Cube(cartesian_to_isometric(position, s.tile), size, s.cube_colors, s.tile)
        self.cubes.append(cube)
        self._objects.append(cube)
        return cube

    # ---------------------------
    # Consulta / dibujo
    # ---------------------------
    def drawables(self) -> Tuple[SceneObject, ...]:
        return tuple(self._objects)

    def render(self, renderer, view) -> None:
        for obj in self._objects:
            obj.draw(renderer, view)

    def cell_at(self, px: float, py: float, view) -> Optional[Tuple[int, int]]:
        """Celda con tile bajo un punto de ventana, o None si no hay nada ahí."""
        sx = (px - view.offset_x) / view.scale
        sy = (py - view.offset_y) / view.scale
        cell = screen_to_cell(sx, sy, self.settings.tile)
        return cell if cell in self._cells else None
