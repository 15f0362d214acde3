"""
Registros de dimensiones y colores (solo lectura).

El motor nunca calcula defaults acá: los valores llegan de los módulos de
isoscene/config o del JSON de escena. Validamos al construir para que
una transformación degenerada falle antes de producir Infinity/NaN.
"""

import math
from dataclasses import dataclass

from isoscene.errors import DegenerateConfiguration


def is_finite_number(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def _require_finite(name: str, value: float) -> None:
    if not is_finite_number(value):
        raise DegenerateConfiguration(f"{name} debe ser un número finito, llegó {value!r}")


def validate_zoom_range(min_zoom: float, max_zoom: float) -> None:
    """Zoom acotado a [min, max]: ambos finitos, min > 0 y min <= max."""
    _require_finite("min_zoom", min_zoom)
    _require_finite("max_zoom", max_zoom)
    if min_zoom <= 0 or min_zoom > max_zoom:
        raise DegenerateConfiguration(f"Rango de zoom inválido: [{min_zoom}, {max_zoom}]")


@dataclass(frozen=True)
class TileDimensions:
    width: float
    height: float
    thickness: float = 0.0

    def __post_init__(self):
        for name in ("width", "height", "thickness"):
            _require_finite(f"tile.{name}", getattr(self, name))
        if self.width <= 0 or self.height <= 0:
            raise DegenerateConfiguration(
                f"El tile necesita ancho/alto positivos (w={self.width}, h={self.height})"
            )


@dataclass(frozen=True)
class WallDimensions:
    height: float
    thickness: float

    def __post_init__(self):
        _require_finite("wall.height", self.height)
        _require_finite("wall.thickness", self.thickness)


@dataclass(frozen=True)
class SideColors:
    """Colores de un lado de la pared (superficie, borde, borde superior)."""
    surface: int
    border: int
    border_top: int


@dataclass(frozen=True)
class WallColors:
    left: SideColors
    right: SideColors


@dataclass(frozen=True)
class TileColors:
    surface: int
    margin: int
    left_border: int
    right_border: int


@dataclass(frozen=True)
class CubeFaceColors:
    top: int
    left: int
    right: int
