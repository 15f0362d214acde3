"""
Parámetros de la cámara (pan/zoom).
"""

MIN_ZOOM = 0.1           # zoom mínimo (escena muy lejos)
MAX_ZOOM = 3.0           # zoom máximo
INITIAL_ZOOM = 1.0

# Cuánto zoom resta cada unidad de deltaY de la rueda
ZOOM_SENSITIVITY = 0.001

# pygame entrega "muescas" (event.y = ±1); el navegador, ~100 px por muesca
WHEEL_STEP = 100

# Botón que arrastra la escena (1 = izquierdo)
DRAG_BUTTON = 1
