from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Tuple

from .board import (
    ADJACENCY,
    LOW_TOKEN_NUMBERS,
    NUMBER_TOKENS,
    RED_TOKEN_NUMBERS,
    TERRAIN_COUNTS,
    TILE_COUNT,
    BoardAssignment,
    Terrain,
)

BoardPredicate = Callable[[BoardAssignment], bool]


def validate_standard_counts(board: BoardAssignment) -> bool:
    if len(board.tiles) != TILE_COUNT:
        return False

    terrain_counts: Dict[Terrain, int] = {terrain: 0 for terrain in TERRAIN_COUNTS}
    numbers: List[int] = []
    for position, tile in enumerate(board.tiles):
        if tile.position != position:
            return False
        terrain_counts[tile.terrain] += 1
        if tile.terrain is Terrain.DESERT:
            if tile.token is not None:
                return False
        elif tile.token is None:
            return False
        else:
            numbers.append(tile.token)

    if terrain_counts != dict(TERRAIN_COUNTS):
        return False

    return sorted(numbers) == sorted(NUMBER_TOKENS)


def validate_red_token_spacing(board: BoardAssignment) -> bool:
    red_positions = {tile.position for tile in board.tiles if tile.token in RED_TOKEN_NUMBERS}
    if len(red_positions) <= 1:
        return True

    for position in red_positions:
        for neighbor in ADJACENCY[position]:
            if board.tiles[neighbor].terrain is Terrain.DESERT:
                continue
            if neighbor in red_positions:
                return False
    return True


def validate_red_tokens_per_terrain(board: BoardAssignment) -> bool:
    """A terrain may hold one 6 and one 8, but never two of either."""
    for terrain_tokens in _tokens_by_terrain(board).values():
        for red_number in RED_TOKEN_NUMBERS:
            if terrain_tokens.count(red_number) > 1:
                return False
    return True


def validate_low_tokens_per_terrain(board: BoardAssignment) -> bool:
    for terrain_tokens in _tokens_by_terrain(board).values():
        low_count = sum(1 for token in terrain_tokens if token in LOW_TOKEN_NUMBERS)
        if low_count > 1:
            return False
    return True


FAIRNESS_RULES: Tuple[Tuple[str, BoardPredicate], ...] = (
    ("red_token_spacing", validate_red_token_spacing),
    ("red_tokens_per_terrain", validate_red_tokens_per_terrain),
    ("low_tokens_per_terrain", validate_low_tokens_per_terrain),
)


def fairness_violations(board: BoardAssignment) -> List[str]:
    return [name for name, predicate in FAIRNESS_RULES if not predicate(board)]


def is_fair_board(board: BoardAssignment) -> bool:
    return all(predicate(board) for _, predicate in FAIRNESS_RULES)


def _tokens_by_terrain(board: BoardAssignment) -> Mapping[Terrain, List[int]]:
    grouped: Dict[Terrain, List[int]] = {}
    for tile in board.tiles:
        if tile.terrain is Terrain.DESERT or tile.token is None:
            continue
        grouped.setdefault(tile.terrain, []).append(tile.token)
    return grouped
