"""
Dimensiones y paleta de las paredes.
Los bordes salen de oscurecer la superficie, así un cambio de color base
arrastra todo el lado.
"""

from isoscene.geometry.dimensions import SideColors, WallColors, WallDimensions
from isoscene.utils.colors import darken_color

WALL_DIMENSIONS = WallDimensions(
    height=64,     # alto de la pared sobre el tile
    thickness=8,   # espesor (borde y tapa)
)

_LEFT_BASE = 0xB0A89A
_RIGHT_BASE = 0x8E8678

WALL_COLORS = WallColors(
    left=SideColors(
        surface=_LEFT_BASE,
        border=darken_color(_LEFT_BASE, 25),
        border_top=darken_color(_LEFT_BASE, -15),   # tapa un poco más clara
    ),
    right=SideColors(
        surface=_RIGHT_BASE,
        border=darken_color(_RIGHT_BASE, 25),
        border_top=darken_color(_RIGHT_BASE, -15),
    ),
)
