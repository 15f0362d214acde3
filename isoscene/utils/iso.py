import math
from typing import Tuple

from isoscene.config.tile import TILE_DIMENSIONS
from isoscene.errors import DegenerateConfiguration
from isoscene.utils.point3d import Vector3


def _half_extents(tile) -> Tuple[float, float]:
    w, h = tile.width, tile.height
    if not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0:
        raise DegenerateConfiguration(f"Tile degenerado: w={w}, h={h}")
    return w / 2, h / 2


def cartesian_to_isometric(position, tile=TILE_DIMENSIONS) -> Vector3:
    # proyección isométrica clásica (rombo w x h); z se mide en altos de tile
    hw, hh = _half_extents(tile)
    x, y, z = position
    return Vector3(
        (x - y) * hw,
        (x + y) * hh,
        z * tile.height,
    )


def isometric_to_cartesian(position, tile=TILE_DIMENSIONS) -> Vector3:
    # inversa del sistema:
    # iso_x = (x - y) * hw  => x - y = iso_x / hw
    # iso_y = (x + y) * hh  => x + y = iso_y / hh
    # sumando y restando se despejan x e y
    hw, hh = _half_extents(tile)
    iso_x, iso_y, iso_z = position
    return Vector3(
        (iso_x / hw + iso_y / hh) / 2,
        (iso_y / hh - iso_x / hw) / 2,
        iso_z / tile.height,
    )


def isometric_to_screen(position) -> Tuple[float, float]:
    """Ancla 2D de un punto isométrico: la altura lo sube en pantalla."""
    iso_x, iso_y, iso_z = position
    return iso_x, iso_y - iso_z


def screen_to_cell(x: float, y: float, tile=TILE_DIMENSIONS) -> Tuple[int, int]:
    """
    Celda (columna, fila) bajo un punto de escena (sin cámara aplicada).
    El ancla de cada tile es la esquina del bounding box, el rombo arranca
    en (w/2, 0), así que corremos el punto medio tile a la izquierda.
    """
    hw, _ = _half_extents(tile)
    cart = isometric_to_cartesian((x - hw, y, 0.0), tile)
    return math.floor(cart.x), math.floor(cart.y)


def to_pixels(iso_x: float, iso_y: float, scale: float,
              offset_x: float = 0, offset_y: float = 0) -> Tuple[int, int]:
    """
    Convierte coordenadas de escena a coordenadas de ventana (píxeles).
    """
    sx = int(round(offset_x + iso_x * scale))
    sy = int(round(offset_y + iso_y * scale))
    return sx, sy
