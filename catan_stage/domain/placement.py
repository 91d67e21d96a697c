from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .board import POSITIONS, ROW_COUNTS

Vec3 = Tuple[float, float, float]

TILE_RADIUS = 2.0
BORDER_RADIUS = 2.2
TILE_HEIGHT = 0.2
BORDER_HEIGHT = 0.1
TILE_RAISE = 0.05
TILE_ELEVATION = 0.1  # just above the water

COLUMN_SPACING = 3.6
ROW_SPACING = COLUMN_SPACING * math.sqrt(3) / 2


@dataclass(frozen=True)
class Placement:
    position: int
    row: int
    column: int
    x: float
    y: float
    z: float

    @property
    def center(self) -> Vec3:
        return (self.x, self.y, self.z)

    @property
    def border_top(self) -> float:
        return self.y + BORDER_HEIGHT

    @property
    def tile_top(self) -> float:
        return self.y + TILE_RAISE + TILE_HEIGHT


def world_position(row: int, column: int) -> Vec3:
    count = ROW_COUNTS[row]
    middle_row = (len(ROW_COUNTS) - 1) / 2
    z = (row - middle_row) * ROW_SPACING
    start_x = -(count - 1) * COLUMN_SPACING / 2
    x = start_x + column * COLUMN_SPACING
    return (x, TILE_ELEVATION, z)


def hex_corners(center: Vec3, radius: float, y: float) -> List[Vec3]:
    """Corners of a flat hex face at height `y`, with points on the +z and -z sides."""
    corners: List[Vec3] = []
    for corner_index in range(6):
        angle = math.radians(60 * corner_index + 30)
        corners.append((center[0] + radius * math.cos(angle), y, center[2] + radius * math.sin(angle)))
    return corners


def _build_placements() -> Tuple[Placement, ...]:
    placements: List[Placement] = []
    for pos in POSITIONS:
        x, y, z = world_position(pos.row, pos.column)
        placements.append(Placement(position=pos.index, row=pos.row, column=pos.column, x=x, y=y, z=z))
    return tuple(placements)


PLACEMENTS: Tuple[Placement, ...] = _build_placements()


def placement(position: int) -> Placement:
    return PLACEMENTS[position]
