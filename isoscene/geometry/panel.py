from dataclasses import dataclass
from typing import Tuple

Vertex = Tuple[float, float]


@dataclass(frozen=True)
class Panel:
    """
    Polígono relleno: vértices en pantalla relativos al ancla + un color 0xRRGGBB.
    side/kind solo identifican la faceta (p.ej. "left"/"border_top").
    """
    points: Tuple[Vertex, ...]
    color: int
    side: str = ""
    kind: str = ""
    outline: int = -1   # color de contorno; -1 = sin contorno

    def translated(self, dx: float, dy: float) -> "Panel":
        return Panel(
            points=tuple((x + dx, y + dy) for x, y in self.points),
            color=self.color,
            side=self.side,
            kind=self.kind,
            outline=self.outline,
        )


# Nombre que usan las paredes
WallPanel = Panel
