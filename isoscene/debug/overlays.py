"""
Overlays de depuración: marcadores temporales sobre celdas clickeadas.
Diseño:
- DebugOverlays.add_cell(cell)   -> registra un marcador temporal
- DebugOverlays.update(dt_ms)    -> decrementa vida
- DebugOverlays.draw(renderer, view) -> contorno del rombo, se apaga con el tiempo

No usa pygame directamente: dibuja a través del renderer.
"""

from dataclasses import dataclass
from typing import List, Tuple

from isoscene.config.tile import TILE_DIMENSIONS
from isoscene.utils.colors import darken_color
from isoscene.utils.iso import cartesian_to_isometric, isometric_to_screen, to_pixels

MARKER_COLOR = 0x40DC78


@dataclass
class CellMarker:
    cell: Tuple[int, int]
    ttl_ms: int = 600     # vida útil en ms
    max_ttl_ms: int = 600

    def alive(self) -> bool:
        return self.ttl_ms > 0

    def fade(self) -> float:
        # 1 = recién creado, 0 = muerto
        return max(0.0, min(1.0, self.ttl_ms / float(self.max_ttl_ms)))


class DebugOverlays:
    def __init__(self, tile=TILE_DIMENSIONS):
        self.tile = tile
        self._markers: List[CellMarker] = []

    @property
    def markers(self) -> Tuple[CellMarker, ...]:
        return tuple(self._markers)

    # ---------- API ----------
    def add_cell(self, cell: Tuple[int, int], ttl_ms: int = 600) -> None:
        self._markers.append(CellMarker(cell=cell, ttl_ms=ttl_ms, max_ttl_ms=ttl_ms))

    def clear(self) -> None:
        self._markers.clear()

    def update(self, dt_ms: int) -> None:
        if not self._markers:
            return
        for m in self._markers:
            m.ttl_ms = max(0, m.ttl_ms - int(dt_ms))
        # eliminar muertos
        self._markers = [m for m in self._markers if m.alive()]

    def draw(self, renderer, view) -> None:
        w, h = self.tile.width, self.tile.height
        for m in self._markers:
            ax, ay = isometric_to_screen(cartesian_to_isometric((m.cell[0], m.cell[1], 0), self.tile))
            diamond = ((ax + w / 2, ay), (ax + w, ay + h / 2), (ax + w / 2, ay + h), (ax, ay + h / 2))
            pts = [to_pixels(x, y, view.scale, view.offset_x, view.offset_y) for x, y in diamond]
            # Fade lineal hacia negro
            color = darken_color(MARKER_COLOR, (1.0 - m.fade()) * 100)
            renderer.draw_polygon(pts, color, width=2)
