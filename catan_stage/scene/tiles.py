from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from catan_stage.domain.board import BoardAssignment, Terrain
from catan_stage.domain.placement import PLACEMENTS, Placement
from catan_stage.domain.terrain import terrain_style

from .tokens import is_high_frequency, pip_count


@dataclass(frozen=True)
class TileVisual:
    position: int
    terrain: Terrain
    color: str
    texture: Optional[str]
    token: Optional[int]
    placement: Placement

    @property
    def show_token(self) -> bool:
        return self.token is not None

    @property
    def pips(self) -> int:
        return pip_count(self.token)

    @property
    def highlighted(self) -> bool:
        return is_high_frequency(self.token)


def build_tile_visuals(board: BoardAssignment) -> List[TileVisual]:
    visuals: List[TileVisual] = []
    for tile in board.tiles:
        style = terrain_style(tile.terrain)
        visuals.append(
            TileVisual(
                position=tile.position,
                terrain=tile.terrain,
                color=style.color,
                texture=style.texture,
                token=tile.token,
                placement=PLACEMENTS[tile.position],
            )
        )
    return visuals
