"""Board tables, fairness rules and layout generation."""

from .board import (
    ADJACENCY,
    NUMBER_TOKENS,
    POSITIONS,
    TERRAIN_COUNTS,
    BoardAssignment,
    GridPosition,
    Terrain,
    TileAssignment,
    build_assignment,
)
from .placement import PLACEMENTS, Placement
from .randomizer import MAX_GENERATION_ATTEMPTS, describe_outcome, generate_board
from .rules import fairness_violations, is_fair_board, validate_standard_counts
from .terrain import TERRAIN_STYLES, TerrainStyle

__all__ = [
    "ADJACENCY",
    "MAX_GENERATION_ATTEMPTS",
    "NUMBER_TOKENS",
    "PLACEMENTS",
    "POSITIONS",
    "TERRAIN_COUNTS",
    "TERRAIN_STYLES",
    "BoardAssignment",
    "GridPosition",
    "Placement",
    "Terrain",
    "TerrainStyle",
    "TileAssignment",
    "build_assignment",
    "describe_outcome",
    "fairness_violations",
    "generate_board",
    "is_fair_board",
    "validate_standard_counts",
]
