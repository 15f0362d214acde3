ANCHO, ALTO = 1024, 768
FPS = 60

# Dónde cae el origen de la escena al arrancar (pan inicial de la cámara)
ORIGEN_X, ORIGEN_Y = ANCHO // 2 - 32, ALTO // 4

COLOR_FONDO = 0x1E1E28
