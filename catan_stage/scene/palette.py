from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ScenePalette:
    key: str
    sky: str
    water: str
    water_opacity: float
    tile_border: str
    coin_fill: str
    coin_rim: str
    coin_text: str
    coin_hot_text: str
    pip_marker: str
    pip_hot_marker: str
    desert_text: str
    face_outline: str


_PALETTES: Dict[str, ScenePalette] = {
    "light": ScenePalette(
        key="light",
        sky="#87CEEB",
        water="#006994",
        water_opacity=0.8,
        tile_border="#654321",
        coin_fill="#F5F5DC",
        coin_rim="#C9C9A8",
        coin_text="#8B4513",
        coin_hot_text="#C62828",
        pip_marker="#8B4513",
        pip_hot_marker="#C62828",
        desert_text="#6B4F2D",
        face_outline="",
    ),
    "dark": ScenePalette(
        key="dark",
        sky="#0F1722",
        water="#0B3D5C",
        water_opacity=0.85,
        tile_border="#3E2A16",
        coin_fill="#1E2B3A",
        coin_rim="#3A4C60",
        coin_text="#F0F5FA",
        coin_hot_text="#FF8D8D",
        pip_marker="#B6C5D6",
        pip_hot_marker="#FF8D8D",
        desert_text="#F1D4A6",
        face_outline="",
    ),
    "high_contrast": ScenePalette(
        key="high_contrast",
        sky="#000000",
        water="#003A66",
        water_opacity=1.0,
        tile_border="#FFFFFF",
        coin_fill="#000000",
        coin_rim="#FFFFFF",
        coin_text="#FFFFFF",
        coin_hot_text="#FF4D4D",
        pip_marker="#FFFFFF",
        pip_hot_marker="#FF4D4D",
        desert_text="#FFFFFF",
        face_outline="#FFFFFF",
    ),
}


def get_palette(theme_key: str) -> ScenePalette:
    normalized = str(theme_key).strip().lower()
    return _PALETTES.get(normalized, _PALETTES["light"])


def available_palettes() -> List[str]:
    return list(_PALETTES.keys())
