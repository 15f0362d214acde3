"""
Cámara 2D: paneo por arrastre + zoom con la rueda sobre la raíz de la escena.

No registra listeners ni conoce el loop de eventos: el host llama a los
handlers (ver isoscene/core/input.py para el cableado con pygame).

Estados:
- IDLE      -> pointer down (habilitada)     -> DRAGGING
- DRAGGING  -> pointer up / leave            -> IDLE
- DRAGGING  -> pointer down                  -> DRAGGING (reinicia el ancla)
Deshabilitada, todo evento es no-op. Deshabilitar NO borra el ancla: al
rehabilitar, el arrastre sigue desde donde quedó.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pygame

from isoscene.config.camera import INITIAL_ZOOM, MAX_ZOOM, MIN_ZOOM, ZOOM_SENSITIVITY
from isoscene.geometry.dimensions import validate_zoom_range


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


@dataclass
class SceneRoot:
    """Raíz de la escena: traslación (pan) + escala uniforme (zoom)."""
    position: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    scale: float = INITIAL_ZOOM


@dataclass(frozen=True)
class ViewTransform:
    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0


class CameraState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class Camera:
    def __init__(self, stage: Optional[SceneRoot] = None,
                 min_zoom: float = MIN_ZOOM, max_zoom: float = MAX_ZOOM,
                 sensitivity: float = ZOOM_SENSITIVITY):
        # Rango invertido o no finito: DegenerateConfiguration (antes de tocar la escena)
        validate_zoom_range(min_zoom, max_zoom)
        self.stage = stage if stage is not None else SceneRoot()
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.sensitivity = sensitivity

        self._enabled: bool = True
        self._drag_anchor: Optional[pygame.math.Vector2] = None

        # El zoom arranca en la escala que ya tenga la escena (acotada)
        self._zoom: float = _clamp(self.stage.scale, self.min_zoom, self.max_zoom)
        self.stage.scale = self._zoom

    # ---------------------------
    # Estado
    # ---------------------------
    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def drag_anchor(self) -> Optional[pygame.math.Vector2]:
        return None if self._drag_anchor is None else pygame.math.Vector2(self._drag_anchor)

    @property
    def state(self) -> CameraState:
        return CameraState.IDLE if self._drag_anchor is None else CameraState.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._drag_anchor is not None

    # ---------------------------
    # Handlers
    # ---------------------------
    def on_pointer_down(self, position) -> None:
        if not self._enabled:
            return
        # Si ya estaba arrastrando, simplemente se reinicia el ancla
        self._drag_anchor = pygame.math.Vector2(position)

    def on_pointer_move(self, position) -> None:
        if not self._enabled or self._drag_anchor is None:
            return
        current = pygame.math.Vector2(position)
        delta = current - self._drag_anchor
        self.stage.position += delta
        # Arrastre incremental: el próximo delta se mide desde acá
        self._drag_anchor = current

    def on_pointer_up(self) -> None:
        self._drag_anchor = None

    # Salir de la ventana corta el arrastre igual que soltar el botón
    on_pointer_leave = on_pointer_up

    def on_wheel(self, delta_y: float) -> None:
        """deltaY > 0 (rueda hacia abajo) aleja; < 0 acerca."""
        if not self._enabled:
            return
        self._zoom -= delta_y * self.sensitivity
        self._zoom = _clamp(self._zoom, self.min_zoom, self.max_zoom)
        self.stage.scale = self._zoom

    def enable_controls(self) -> bool:
        self._enabled = True
        return self._enabled

    def disable_controls(self) -> bool:
        self._enabled = False
        return self._enabled

    # ---------------------------
    # Vista
    # ---------------------------
    def view_transform(self) -> ViewTransform:
        return ViewTransform(self.stage.position.x, self.stage.position.y, self.stage.scale)

    def reset(self, position=(0, 0)) -> None:
        """Vuelve el pan a `position` y el zoom a 1 (acotado). No toca el gate."""
        self.stage.position = pygame.math.Vector2(position)
        self._zoom = _clamp(INITIAL_ZOOM, self.min_zoom, self.max_zoom)
        self.stage.scale = self._zoom
        self._drag_anchor = None
