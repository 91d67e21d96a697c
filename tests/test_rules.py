import unittest

from catan_stage.domain.board import Terrain, build_assignment
from catan_stage.domain.rules import (
    fairness_violations,
    is_fair_board,
    validate_low_tokens_per_terrain,
    validate_red_token_spacing,
    validate_red_tokens_per_terrain,
    validate_standard_counts,
)

W, H, S, O, B, D = (
    Terrain.WOOD,
    Terrain.WHEAT,
    Terrain.SHEEP,
    Terrain.ORE,
    Terrain.BRICK,
    Terrain.DESERT,
)

FAIR_TERRAINS = [W, H, S, O, B, W, H, S, O, D, B, W, H, S, O, B, W, H, S]
FAIR_TOKENS = {
    0: 6, 1: 2, 2: 6, 3: 3, 4: 3, 5: 12, 6: 4, 7: 4, 8: 5,
    10: 5, 11: 9, 12: 9, 13: 10, 14: 10, 15: 11, 16: 8, 17: 11, 18: 8,
}


def make_board(tokens=None, terrains=None):
    tokens = dict(FAIR_TOKENS if tokens is None else tokens)
    terrains = list(FAIR_TERRAINS if terrains is None else terrains)
    order = [tokens[position] for position in range(19) if terrains[position] is not Terrain.DESERT]
    return build_assignment(terrains, order)


def swapped(first: int, second: int):
    tokens = dict(FAIR_TOKENS)
    tokens[first], tokens[second] = tokens[second], tokens[first]
    return tokens


class FairnessRuleTests(unittest.TestCase):
    def test_reference_board_is_fair(self) -> None:
        board = make_board()
        self.assertTrue(validate_standard_counts(board))
        self.assertTrue(is_fair_board(board))
        self.assertEqual(fairness_violations(board), [])

    def test_adjacent_red_tokens_are_rejected(self) -> None:
        board = make_board(swapped(1, 2))  # 6 next to the 6 on position 0
        self.assertFalse(validate_red_token_spacing(board))
        self.assertTrue(validate_red_tokens_per_terrain(board))
        self.assertTrue(validate_low_tokens_per_terrain(board))
        self.assertEqual(fairness_violations(board), ["red_token_spacing"])

    def test_six_next_to_eight_is_rejected(self) -> None:
        board = make_board(swapped(1, 16))  # 8 on position 1 touches the 6 on 0 and 2
        self.assertFalse(validate_red_token_spacing(board))

    def test_two_sixes_on_one_terrain_are_rejected(self) -> None:
        board = make_board(swapped(2, 5))  # wood now holds 6 on 0 and 5
        self.assertTrue(validate_red_token_spacing(board))
        self.assertFalse(validate_red_tokens_per_terrain(board))
        self.assertTrue(validate_low_tokens_per_terrain(board))
        self.assertEqual(fairness_violations(board), ["red_tokens_per_terrain"])

    def test_one_six_and_one_eight_on_a_terrain_is_allowed(self) -> None:
        board = make_board()
        wood_tokens = [board.tile(position).token for position in board.positions_of(W)]
        self.assertIn(6, wood_tokens)
        self.assertIn(8, wood_tokens)
        self.assertTrue(validate_red_tokens_per_terrain(board))

    def test_clustered_low_tokens_are_rejected(self) -> None:
        board = make_board(swapped(3, 6))  # wheat now holds 2 and 3
        self.assertTrue(validate_red_token_spacing(board))
        self.assertTrue(validate_red_tokens_per_terrain(board))
        self.assertFalse(validate_low_tokens_per_terrain(board))
        self.assertEqual(fairness_violations(board), ["low_tokens_per_terrain"])

    def test_standard_counts_reject_tokened_desert(self) -> None:
        board = make_board()
        tiles = list(board.tiles)
        desert = tiles[9]
        tiles[9] = type(desert)(position=9, terrain=desert.terrain, token=7)
        tampered = type(board)(tiles=tuple(tiles))
        self.assertFalse(validate_standard_counts(tampered))

    def test_standard_counts_reject_short_board(self) -> None:
        board = make_board()
        shortened = type(board)(tiles=board.tiles[:-1])
        self.assertFalse(validate_standard_counts(shortened))


if __name__ == "__main__":
    unittest.main()
