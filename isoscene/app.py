import pygame

from isoscene.config.settings import SceneSettings, load_settings
from isoscene.core.camera import Camera, SceneRoot
from isoscene.core.input import dispatch_camera_event
from isoscene.debug.overlays import DebugOverlays
from isoscene.render.renderer import PygameRenderer
from isoscene.scene import Scene
from isoscene.utils.colors import BLANCO, hex_to_rgb
from isoscene.utils.screen import ALTO, ANCHO, COLOR_FONDO, FPS, ORIGEN_X, ORIGEN_Y


class App:
    """
    Ventana + loop principal.
    Teclas: F1 = debug (marcadores de celda), F2 = habilitar/deshabilitar cámara,
    R = resetear cámara, Esc = salir. Arrastre con botón izquierdo, zoom con la rueda.
    """

    def __init__(self, settings: SceneSettings = None):
        # Ventana
        self.PANTALLA = pygame.display.set_mode((ANCHO, ALTO))
        pygame.display.set_caption('Escena isométrica')
        self.renderer = PygameRenderer(self.PANTALLA)

        self.settings = settings or load_settings()
        self.scene = Scene.from_settings(self.settings)

        # Cámara sobre la raíz de la escena
        self.stage = SceneRoot(position=pygame.math.Vector2(ORIGEN_X, ORIGEN_Y))
        self.camera = Camera(
            self.stage,
            min_zoom=self.settings.min_zoom,
            max_zoom=self.settings.max_zoom,
            sensitivity=self.settings.zoom_sensitivity,
        )

        # Reloj
        self.reloj = pygame.time.Clock()

        # Debug
        self.debug = self.settings.debug
        self.debug_overlays = DebugOverlays(self.settings.tile)
        self.font_hud = pygame.font.Font(None, 24)

        print(f"[App] Escena: {len(self.scene.tiles)} tiles, "
              f"{len(self.scene.walls)} paredes, {len(self.scene.cubes)} cubos")

    # ---------------------------
    # Input
    # ---------------------------
    def _handle_key(self, key) -> bool:
        """Devuelve False si hay que salir."""
        if key == pygame.K_ESCAPE:
            return False

        if key == pygame.K_F1:
            self.debug = not self.debug
            if not self.debug:
                self.debug_overlays.clear()

        elif key == pygame.K_F2:
            if self.camera.enabled:
                self.camera.disable_controls()
            else:
                self.camera.enable_controls()
            print(f"[App] Cámara {'habilitada' if self.camera.enabled else 'deshabilitada'}")

        elif key == pygame.K_r:
            self.camera.reset((ORIGEN_X, ORIGEN_Y))

        return True

    def _handle_click(self, pos) -> None:
        if not self.debug:
            return
        cell = self.scene.cell_at(pos[0], pos[1], self.camera.view_transform())
        if cell is not None:
            self.debug_overlays.add_cell(cell)

    # ---------------------------
    # Render
    # ---------------------------
    def _render_hud(self) -> None:
        estado = "on" if self.camera.enabled else "off"
        txt = f"zoom {self.camera.zoom:.2f}  |  cámara {estado}  |  F1 debug  F2 cámara  R reset"
        surf = self.font_hud.render(txt, True, hex_to_rgb(BLANCO))
        self.PANTALLA.blit(surf, (10, ALTO - 28))

    def render(self) -> None:
        view = self.camera.view_transform()
        self.renderer.clear(COLOR_FONDO)
        self.scene.render(self.renderer, view)
        if self.debug:
            self.debug_overlays.draw(self.renderer, view)
        self._render_hud()
        pygame.display.flip()

    # ---------------------------
    # Bucle principal
    # ---------------------------
    def game_loop(self) -> None:
        ejecutando = True
        while ejecutando:
            dt = self.reloj.tick(FPS)
            self.debug_overlays.update(dt)

            for evento in pygame.event.get():
                if evento.type == pygame.QUIT:
                    ejecutando = False
                elif evento.type == pygame.KEYDOWN:
                    ejecutando = self._handle_key(evento.key) and ejecutando
                else:
                    if evento.type == pygame.MOUSEBUTTONDOWN and evento.button == 1:
                        self._handle_click(evento.pos)
                    dispatch_camera_event(self.camera, evento)

            self.render()
