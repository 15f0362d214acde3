"""
Errores de geometría del motor isométrico.

Solo la geometría falla: la cámara y el input nunca lanzan, degradan a no-op.
"""


class IsoSceneError(ValueError):
    """Base de los errores de configuración/geometría."""


class InvalidDirection(IsoSceneError):
    """Dirección de pared desconocida: no se puede generar geometría."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Dirección de pared inválida: {value!r}")


class DegenerateConfiguration(IsoSceneError):
    """Dimensiones en cero, negativas o no finitas (la transformación no existe)."""
