from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .board import Terrain


@dataclass(frozen=True)
class TerrainStyle:
    terrain: Terrain
    label: str
    color: str
    texture: Optional[str]


TERRAIN_STYLES: Mapping[Terrain, TerrainStyle] = MappingProxyType(
    {
        Terrain.WOOD: TerrainStyle(Terrain.WOOD, "Wood", "#228B22", "wood.png"),
        Terrain.WHEAT: TerrainStyle(Terrain.WHEAT, "Wheat", "#FFD700", "wheat.png"),
        Terrain.SHEEP: TerrainStyle(Terrain.SHEEP, "Sheep", "#9ACD32", "sheep.png"),
        Terrain.ORE: TerrainStyle(Terrain.ORE, "Ore", "#708090", "ore.png"),
        Terrain.BRICK: TerrainStyle(Terrain.BRICK, "Brick", "#B5542D", "brick.png"),
        # Desert is drawn flat; it carries no texture.
        Terrain.DESERT: TerrainStyle(Terrain.DESERT, "Desert", "#E4C590", None),
    }
)


def terrain_style(terrain: Terrain) -> TerrainStyle:
    return TERRAIN_STYLES[terrain]


def terrain_color(terrain: Terrain) -> str:
    return TERRAIN_STYLES[terrain].color


def terrain_texture(terrain: Terrain) -> Optional[str]:
    return TERRAIN_STYLES[terrain].texture
