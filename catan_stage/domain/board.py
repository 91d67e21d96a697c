from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

AxialCoord = Tuple[int, int]

BOARD_RADIUS = 2
ROW_COUNTS: Tuple[int, ...] = (3, 4, 5, 4, 3)
TILE_COUNT = sum(ROW_COUNTS)

_AXIAL_DIRECTIONS: Tuple[AxialCoord, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


class Terrain(str, Enum):
    WOOD = "wood"
    WHEAT = "wheat"
    SHEEP = "sheep"
    ORE = "ore"
    BRICK = "brick"
    DESERT = "desert"


TERRAIN_COUNTS: Mapping[Terrain, int] = MappingProxyType(
    {
        Terrain.WOOD: 4,
        Terrain.WHEAT: 4,
        Terrain.SHEEP: 4,
        Terrain.ORE: 3,
        Terrain.BRICK: 3,
        Terrain.DESERT: 1,
    }
)

NUMBER_TOKENS: Tuple[int, ...] = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12)
RED_TOKEN_NUMBERS: FrozenSet[int] = frozenset({6, 8})
LOW_TOKEN_NUMBERS: FrozenSet[int] = frozenset({2, 3, 12})


@dataclass(frozen=True)
class GridPosition:
    index: int
    row: int
    column: int
    q: int
    r: int


@dataclass(frozen=True)
class TileAssignment:
    position: int
    terrain: Terrain
    token: Optional[int]

    @property
    def is_desert(self) -> bool:
        return self.terrain is Terrain.DESERT


@dataclass(frozen=True)
class BoardAssignment:
    """One generated layout: 19 tiles in position order plus how it was reached.

    `attempts` counts the candidates drawn before this one was returned and
    `validated` is False when the generator gave up and handed back its last
    candidate unchecked.
    """

    tiles: Tuple[TileAssignment, ...]
    attempts: int = 1
    validated: bool = True

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)

    def tile(self, position: int) -> TileAssignment:
        return self.tiles[position]

    @property
    def is_fallback(self) -> bool:
        return not self.validated

    @property
    def desert_position(self) -> int:
        for tile in self.tiles:
            if tile.is_desert:
                return tile.position
        raise LookupError("Board has no desert tile.")

    def tokens(self) -> List[int]:
        return [tile.token for tile in self.tiles if tile.token is not None]

    def positions_of(self, terrain: Terrain) -> List[int]:
        return [tile.position for tile in self.tiles if tile.terrain is terrain]


def build_assignment(
    terrain_order: Sequence[Terrain],
    token_order: Sequence[int],
    *,
    attempts: int = 1,
    validated: bool = True,
) -> BoardAssignment:
    terrains = list(terrain_order)
    numbers = list(token_order)

    if len(terrains) != TILE_COUNT:
        raise ValueError(f"Expected {TILE_COUNT} terrains, received {len(terrains)}.")

    desert_count = sum(1 for terrain in terrains if terrain is Terrain.DESERT)
    if len(numbers) != TILE_COUNT - desert_count:
        raise ValueError(
            f"Expected {TILE_COUNT - desert_count} number tokens, received {len(numbers)}."
        )

    tiles: List[TileAssignment] = []
    number_index = 0
    for position, terrain in enumerate(terrains):
        if terrain is Terrain.DESERT:
            token = None
        else:
            token = numbers[number_index]
            number_index += 1
        tiles.append(TileAssignment(position=position, terrain=terrain, token=token))

    return BoardAssignment(tiles=tuple(tiles), attempts=attempts, validated=validated)


def terrain_pool() -> List[Terrain]:
    pool: List[Terrain] = []
    for terrain, count in TERRAIN_COUNTS.items():
        pool.extend([terrain] * count)
    return pool


def _generate_axial_coords(radius: int) -> List[AxialCoord]:
    coords: List[AxialCoord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append((q, r))
    coords.sort(key=lambda item: (item[1], item[0]))
    return coords


def _build_positions() -> Tuple[GridPosition, ...]:
    coords = _generate_axial_coords(BOARD_RADIUS)
    positions: List[GridPosition] = []
    index = 0
    for row, count in enumerate(ROW_COUNTS):
        for column in range(count):
            q, r = coords[index]
            positions.append(GridPosition(index=index, row=row, column=column, q=q, r=r))
            index += 1
    return tuple(positions)


def _build_adjacency(positions: Sequence[GridPosition]) -> Mapping[int, FrozenSet[int]]:
    by_coord: Dict[AxialCoord, int] = {(pos.q, pos.r): pos.index for pos in positions}
    adjacency: Dict[int, FrozenSet[int]] = {}
    for pos in positions:
        neighbors = {
            by_coord[(pos.q + dq, pos.r + dr)]
            for dq, dr in _AXIAL_DIRECTIONS
            if (pos.q + dq, pos.r + dr) in by_coord
        }
        adjacency[pos.index] = frozenset(neighbors)
    return MappingProxyType(adjacency)


POSITIONS: Tuple[GridPosition, ...] = _build_positions()
ADJACENCY: Mapping[int, FrozenSet[int]] = _build_adjacency(POSITIONS)


def neighbors(position: int) -> FrozenSet[int]:
    return ADJACENCY[position]
