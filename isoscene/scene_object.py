from typing import Iterable, Tuple

from isoscene.geometry.panel import Panel
from isoscene.utils.iso import isometric_to_screen, to_pixels
from isoscene.utils.point3d import Vector3


class SceneObject:
    """
    Base de todo lo que se dibuja: una posición isométrica propia + paneles
    fijos (se generan una sola vez al construir y no se tocan más).
    """

    def __init__(self, position, panels: Iterable[Panel] = ()):
        # Slot propio: copiamos, nunca compartimos la instancia del llamador
        self.position = Vector3()
        self.position.copy_from(position)
        self.panels: Tuple[Panel, ...] = tuple(panels)

    def anchor(self) -> Tuple[float, float]:
        return isometric_to_screen(self.position)

    def screen_panels(self) -> Tuple[Panel, ...]:
        """Paneles ya trasladados al ancla (coordenadas de escena)."""
        ax, ay = self.anchor()
        return tuple(p.translated(ax, ay) for p in self.panels)

    def draw(self, renderer, view) -> None:
        """
        Empuja cada panel al renderer aplicando la transformación de vista
        (pan + zoom de la cámara).
        """
        for panel in self.screen_panels():
            pts = [to_pixels(x, y, view.scale, view.offset_x, view.offset_y) for x, y in panel.points]
            renderer.draw_polygon(pts, panel.color)
            if panel.outline >= 0:
                renderer.draw_polygon(pts, panel.outline, width=1)
