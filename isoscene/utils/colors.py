from typing import Tuple

# Colores en formato 0xRRGGBB (lo que consume el renderer)
BLANCO = 0xFFFFFF


def _clamp_channel(v: float) -> int:
    return max(0, min(255, int(round(v))))


def darken_color(color: int, percent: float) -> int:
    """
    Oscurece un color 0xRRGGBB un `percent` % por canal.
    Valores negativos aclaran; cada canal queda recortado a 0..255.
    """
    factor = 1 - percent / 100
    r = ((color >> 16) & 0xFF) * factor
    g = ((color >> 8) & 0xFF) * factor
    b = (color & 0xFF) * factor
    return (_clamp_channel(r) << 16) + (_clamp_channel(g) << 8) + _clamp_channel(b)


def hex_to_rgb(color: int) -> Tuple[int, int, int]:
    """0xRRGGBB -> (r, g, b). pygame interpreta los int como RRGGBBAA, así que convertimos antes."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF
