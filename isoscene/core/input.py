import pygame

from isoscene.config.camera import DRAG_BUTTON, WHEEL_STEP


def dispatch_camera_event(camera, evento) -> bool:
    """
    Traduce un evento de pygame a los handlers de la cámara.
    Devuelve True si el evento era de cámara (aunque esté deshabilitada).
    """
    if evento.type == pygame.MOUSEBUTTONDOWN and evento.button == DRAG_BUTTON:
        camera.on_pointer_down(evento.pos)
        return True

    if evento.type == pygame.MOUSEMOTION:
        camera.on_pointer_move(evento.pos)
        return True

    if evento.type == pygame.MOUSEBUTTONUP and evento.button == DRAG_BUTTON:
        camera.on_pointer_up()
        return True

    if evento.type == pygame.WINDOWLEAVE:
        camera.on_pointer_leave()
        return True

    if evento.type == pygame.MOUSEWHEEL:
        # pygame: y > 0 = rueda hacia arriba. Lo pasamos a deltaY estilo navegador.
        camera.on_wheel(-evento.y * WHEEL_STEP)
        return True

    return False
