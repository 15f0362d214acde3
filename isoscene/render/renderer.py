from typing import Sequence, Tuple

import pygame

from isoscene.utils.colors import hex_to_rgb


class PygameRenderer:
    """
    Sumidero de dibujo sobre una pygame.Surface.
    Cualquier objeto con clear()/draw_polygon() sirve (los tests usan uno falso).
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color: int) -> None:
        self.surface.fill(hex_to_rgb(color))

    def draw_polygon(self, points: Sequence[Tuple[float, float]], color: int, width: int = 0) -> None:
        if len(points) < 3:
            return
        pygame.draw.polygon(self.surface, hex_to_rgb(color), points, width)
