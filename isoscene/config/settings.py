"""
Configuración de escena desde JSON (opcional).

Ruta: argumento > $ISOSCENE_CONFIG > assets/scene_config.json.
Si el archivo no está, no se puede leer o tiene una forma inesperada
(tipos equivocados, colores ilegibles), se usan los defaults de
isoscene/config/*. Si se lee pero los valores no sirven (tile en cero,
zoom no finito o invertido), se lanza
DegenerateConfiguration (eso es un error del que escribió el JSON).

Formato (todas las claves opcionales):
{
  "tile":   {"width": 64, "height": 32, "thickness": 8},
  "wall":   {"height": 64, "thickness": 8},
  "wall_colors": {"left":  {"surface": "#B0A89A", "border": ..., "border_top": ...},
                  "right": {...}},
  "camera": {"min_zoom": 0.1, "max_zoom": 3.0, "sensitivity": 0.001},
  "grid":   [[2, 1, 1], [1, 0, 1]],
  "cubes":  [{"position": [2, 4, 0], "size": 32}]
}
"""

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

from isoscene.config.camera import MAX_ZOOM, MIN_ZOOM, ZOOM_SENSITIVITY
from isoscene.config.cube import CUBE_FACE_COLORS, CUBE_SETTINGS
from isoscene.config.tile import TILE_COLORS, TILE_DIMENSIONS, TILE_GRID
from isoscene.config.wall import WALL_COLORS, WALL_DIMENSIONS
from isoscene.errors import DegenerateConfiguration
from isoscene.geometry.dimensions import (
    CubeFaceColors, SideColors, TileColors, TileDimensions, WallColors, WallDimensions,
    is_finite_number, validate_zoom_range,
)

DEFAULT_CONFIG_PATH = os.path.join("assets", "scene_config.json")
CONFIG_ENV = "ISOSCENE_CONFIG"
DEBUG_ENV = "ISOSCENE_DEBUG"


@dataclass
class SceneSettings:
    tile: TileDimensions = TILE_DIMENSIONS
    wall: WallDimensions = WALL_DIMENSIONS
    tile_colors: TileColors = TILE_COLORS
    wall_colors: WallColors = WALL_COLORS
    cube_colors: CubeFaceColors = CUBE_FACE_COLORS
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM
    zoom_sensitivity: float = ZOOM_SENSITIVITY
    grid: Tuple[Tuple[int, ...], ...] = TILE_GRID
    cubes: Tuple[Dict[str, Any], ...] = CUBE_SETTINGS
    debug: bool = False

    def __post_init__(self):
        validate_zoom_range(self.min_zoom, self.max_zoom)
        if not is_finite_number(self.zoom_sensitivity):
            raise DegenerateConfiguration(
                f"Sensibilidad de zoom no finita: {self.zoom_sensitivity!r}"
            )


def _parse_color(value) -> int:
    # acepta 0xRRGGBB como int o "#RRGGBB"
    if isinstance(value, str):
        return int(value.lstrip("#"), 16)
    return int(value)


def _known(cfg: Dict[str, Any], cls) -> Dict[str, Any]:
    # ignoramos claves que el dataclass no conoce
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in cfg.items() if k in names}


def _side_colors(cfg: Dict[str, Any], base: SideColors) -> SideColors:
    return SideColors(
        surface=_parse_color(cfg.get("surface", base.surface)),
        border=_parse_color(cfg.get("border", base.border)),
        border_top=_parse_color(cfg.get("border_top", base.border_top)),
    )


def settings_from_dict(cfg: Dict[str, Any]) -> SceneSettings:
    s = SceneSettings()
    changes: Dict[str, Any] = {}

    if "tile" in cfg:
        changes["tile"] = replace(s.tile, **_known(cfg["tile"], TileDimensions))
    if "wall" in cfg:
        changes["wall"] = replace(s.wall, **_known(cfg["wall"], WallDimensions))
    if "wall_colors" in cfg:
        wc = cfg["wall_colors"]
        changes["wall_colors"] = WallColors(
            left=_side_colors(wc.get("left", {}), s.wall_colors.left),
            right=_side_colors(wc.get("right", {}), s.wall_colors.right),
        )

    cam = cfg.get("camera", {})
    if "min_zoom" in cam:
        changes["min_zoom"] = float(cam["min_zoom"])
    if "max_zoom" in cam:
        changes["max_zoom"] = float(cam["max_zoom"])
    if "sensitivity" in cam:
        changes["zoom_sensitivity"] = float(cam["sensitivity"])

    if "grid" in cfg:
        changes["grid"] = tuple(tuple(int(c) for c in row) for row in cfg["grid"])
    if "cubes" in cfg:
        changes["cubes"] = tuple(
            {"position": tuple(c["position"]), "size": c["size"]} for c in cfg["cubes"]
        )
    if "debug" in cfg:
        changes["debug"] = bool(cfg["debug"])

    # replace() vuelve a validar en __post_init__
    return replace(s, **changes)


def load_settings(path: Optional[str] = None) -> SceneSettings:
    path = path or os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH
    debug = os.getenv(DEBUG_ENV, "0") == "1"

    if not os.path.exists(path):
        return SceneSettings(debug=debug)

    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
        if not isinstance(cfg, dict):
            raise ValueError("la raíz del JSON tiene que ser un objeto")
        settings = settings_from_dict(cfg)
    except DegenerateConfiguration:
        # valores que parsean pero no sirven: error de quien escribió el JSON
        raise
    except (OSError, ValueError, TypeError, AttributeError, KeyError) as e:
        # JSON roto o con forma inesperada (p.ej. "tile": 5, color "zz")
        print(f"[Config] No se pudo leer '{path}': {e}. Usando defaults.")
        return SceneSettings(debug=debug)

    if debug:
        settings.debug = True
    return settings


def save_settings(settings: SceneSettings, path: str = DEFAULT_CONFIG_PATH) -> None:
    data = {
        "tile": asdict(settings.tile),
        "wall": asdict(settings.wall),
        "wall_colors": {
            side: {k: f"#{v:06X}" for k, v in asdict(getattr(settings.wall_colors, side)).items()}
            for side in ("left", "right")
        },
        "camera": {
            "min_zoom": settings.min_zoom,
            "max_zoom": settings.max_zoom,
            "sensitivity": settings.zoom_sensitivity,
        },
        "grid": [list(row) for row in settings.grid],
        "cubes": [{"position": list(c["position"]), "size": c["size"]} for c in settings.cubes],
        "debug": settings.debug,
    }
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
