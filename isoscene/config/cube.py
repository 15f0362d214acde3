"""
Cubos de prueba apoyados sobre la grilla.
"""

from isoscene.geometry.dimensions import CubeFaceColors

CUBE_FACE_COLORS = CubeFaceColors(
    top=0xFF5733,    # naranja
    left=0x3399FF,   # azul
    right=0xFFD700,  # amarillo
)

# (x, y, z) en celdas lógicas + arista en px
CUBE_SETTINGS = (
    {"position": (2, 4, 0), "size": 32},
    {"position": (2, 3, 0), "size": 32},
    {"position": (0, 0, 0), "size": 16},
    {"position": (4, 6, 0), "size": 24},
    {"position": (4, 5, 0), "size": 24},
    {"position": (6, 0, 4), "size": 24},
)
