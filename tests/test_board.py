import math
import unittest

from catan_stage.domain.board import (
    ADJACENCY,
    NUMBER_TOKENS,
    POSITIONS,
    ROW_COUNTS,
    TERRAIN_COUNTS,
    Terrain,
    build_assignment,
    terrain_pool,
)
from catan_stage.domain.placement import COLUMN_SPACING, PLACEMENTS
from catan_stage.domain.terrain import TERRAIN_STYLES


class BoardTableTests(unittest.TestCase):
    def test_positions_are_row_major_3_4_5_4_3(self) -> None:
        self.assertEqual(len(POSITIONS), 19)
        rows = [pos.row for pos in POSITIONS]
        self.assertEqual([rows.count(row) for row in range(5)], list(ROW_COUNTS))
        self.assertEqual([pos.index for pos in POSITIONS], list(range(19)))
        self.assertEqual((POSITIONS[7].row, POSITIONS[7].column), (2, 0))
        self.assertEqual((POSITIONS[18].row, POSITIONS[18].column), (4, 2))

    def test_adjacency_is_symmetric(self) -> None:
        for position, neighbors in ADJACENCY.items():
            self.assertNotIn(position, neighbors)
            for neighbor in neighbors:
                self.assertIn(position, ADJACENCY[neighbor])

    def test_adjacency_degrees(self) -> None:
        self.assertEqual(len(ADJACENCY), 19)
        self.assertEqual(len(ADJACENCY[9]), 6)
        self.assertEqual(ADJACENCY[0], frozenset({1, 3, 4}))
        self.assertEqual(ADJACENCY[18], frozenset({14, 15, 17}))
        edge_count = sum(len(neighbors) for neighbors in ADJACENCY.values()) // 2
        self.assertEqual(edge_count, 42)

    def test_adjacency_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            ADJACENCY[0] = frozenset()  # type: ignore[index]

    def test_adjacency_matches_world_placement(self) -> None:
        for first in range(19):
            for second in range(first + 1, 19):
                a = PLACEMENTS[first]
                b = PLACEMENTS[second]
                distance = math.hypot(a.x - b.x, a.z - b.z)
                adjacent = second in ADJACENCY[first]
                self.assertEqual(
                    adjacent,
                    math.isclose(distance, COLUMN_SPACING, rel_tol=1e-9),
                    msg=f"positions {first} and {second}",
                )

    def test_center_tile_sits_at_origin(self) -> None:
        center = PLACEMENTS[9]
        self.assertAlmostEqual(center.x, 0.0)
        self.assertAlmostEqual(center.z, 0.0)
        self.assertAlmostEqual(center.y, 0.1)

    def test_terrain_pool_matches_counts(self) -> None:
        pool = terrain_pool()
        self.assertEqual(len(pool), 19)
        for terrain, count in TERRAIN_COUNTS.items():
            self.assertEqual(pool.count(terrain), count)
        self.assertEqual(len(NUMBER_TOKENS), 18)
        self.assertNotIn(7, NUMBER_TOKENS)

    def test_every_terrain_has_a_style(self) -> None:
        for terrain in Terrain:
            style = TERRAIN_STYLES[terrain]
            self.assertTrue(style.color.startswith("#"))
        self.assertIsNone(TERRAIN_STYLES[Terrain.DESERT].texture)
        self.assertEqual(TERRAIN_STYLES[Terrain.WOOD].texture, "wood.png")


class BuildAssignmentTests(unittest.TestCase):
    def test_desert_is_skipped_when_dealing_tokens(self) -> None:
        terrains = terrain_pool()
        terrains.remove(Terrain.DESERT)
        terrains.insert(4, Terrain.DESERT)
        board = build_assignment(terrains, list(NUMBER_TOKENS))

        self.assertIsNone(board.tile(4).token)
        self.assertEqual(board.tile(3).token, NUMBER_TOKENS[3])
        self.assertEqual(board.tile(5).token, NUMBER_TOKENS[4])
        self.assertEqual(board.desert_position, 4)
        self.assertEqual(sorted(board.tokens()), sorted(NUMBER_TOKENS))

    def test_wrong_terrain_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_assignment(terrain_pool()[:-1], list(NUMBER_TOKENS))

    def test_wrong_token_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_assignment(terrain_pool(), list(NUMBER_TOKENS)[:-1])

    def test_positions_of_terrain(self) -> None:
        board = build_assignment(terrain_pool(), list(NUMBER_TOKENS))
        self.assertEqual(board.positions_of(Terrain.WOOD), [0, 1, 2, 3])
        self.assertEqual(len(board), 19)


if __name__ == "__main__":
    unittest.main()
