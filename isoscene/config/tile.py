"""
Dimensiones y colores de los tiles + grilla de la escena.
Ajustá a gusto; el motor solo los lee.
"""

from isoscene.geometry.dimensions import TileColors, TileDimensions

TILE_DIMENSIONS = TileDimensions(
    width=64,      # ancho del rombo en px
    height=32,     # alto del rombo (proporción 2:1)
    thickness=8,   # espesor visible del tile
)

TILE_COLORS = TileColors(
    surface=0xFF0000,
    margin=0xFA8072,
    left_border=0xDC143C,
    right_border=0xFF2400,
)

# Códigos de celda (1 = tile solo)
CELL_EMPTY = 0
CELL_WALL_BOTH = 2
CELL_WALL_LEFT = 3
CELL_WALL_RIGHT = 4

# Filas de la grilla (no todas del mismo largo). Fila = y, columna = x.
TILE_GRID = (
    (2, 1, 1, 1, 1, 1),
    (1, 0, 0, 1, 1, 1),
    (1, 0, 1, 1, 1, 1, 1),
    (1, 1, 1),
    (1, 1, 1),
    (1, 0, 0),
    (1, 0, 1),
    (1, 1, 1),
)
