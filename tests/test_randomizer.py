import logging
import random
import unittest

from catan_stage.domain.board import NUMBER_TOKENS, TERRAIN_COUNTS, Terrain
from catan_stage.domain.randomizer import describe_outcome, generate_board
from catan_stage.domain.rules import (
    validate_low_tokens_per_terrain,
    validate_red_token_spacing,
    validate_red_tokens_per_terrain,
    validate_standard_counts,
)

LOGGER_NAME = "catan_stage.domain.randomizer"


class RandomizerTests(unittest.TestCase):
    def test_randomized_board_has_standard_counts(self) -> None:
        board = generate_board(seed=42)
        self.assertTrue(validate_standard_counts(board))

    def test_desert_has_no_number_token(self) -> None:
        board = generate_board(seed=7)
        deserts = [tile for tile in board.tiles if tile.terrain is Terrain.DESERT]
        self.assertEqual(len(deserts), 1)
        self.assertIsNone(deserts[0].token)

    def test_number_tokens_cover_official_set(self) -> None:
        board = generate_board(seed=99)
        self.assertEqual(sorted(board.tokens()), sorted(NUMBER_TOKENS))

    def test_terrain_count_distribution_is_exact(self) -> None:
        board = generate_board(seed=101)
        actual_counts = {terrain: 0 for terrain in TERRAIN_COUNTS}
        for tile in board.tiles:
            actual_counts[tile.terrain] += 1
        self.assertEqual(actual_counts, dict(TERRAIN_COUNTS))

    def test_validated_boards_satisfy_all_rules(self) -> None:
        for seed in range(30):
            board = generate_board(seed=seed)
            self.assertTrue(board.validated, msg=f"seed {seed} fell back")
            self.assertTrue(validate_red_token_spacing(board), msg=f"red spacing, seed {seed}")
            self.assertTrue(validate_red_tokens_per_terrain(board), msg=f"red per terrain, seed {seed}")
            self.assertTrue(validate_low_tokens_per_terrain(board), msg=f"low per terrain, seed {seed}")
            self.assertTrue(validate_standard_counts(board), msg=f"counts, seed {seed}")

    def test_same_seed_gives_same_layout(self) -> None:
        self.assertEqual(generate_board(seed=5).tiles, generate_board(seed=5).tiles)

    def test_explicit_rng_takes_precedence_over_seed(self) -> None:
        from_rng = generate_board(seed=1, rng=random.Random(2))
        from_seed = generate_board(seed=2)
        self.assertEqual(from_rng.tiles, from_seed.tiles)

    def test_desert_position_is_randomized(self) -> None:
        desert_positions = {generate_board(seed=seed).desert_position for seed in range(40)}
        self.assertGreater(len(desert_positions), 1)

    def test_attempts_count_rejected_candidates(self) -> None:
        calls = []

        def accept_third(board) -> bool:
            calls.append(board)
            return len(calls) == 3

        board = generate_board(seed=3, validator=accept_third)
        self.assertEqual(len(calls), 3)
        self.assertEqual(board.attempts, 3)
        self.assertTrue(board.validated)

    def test_success_does_not_warn(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="DEBUG") as captured:
            generate_board(seed=11, validator=lambda board: True)
        self.assertFalse([record for record in captured.records if record.levelno >= logging.WARNING])


class FallbackTests(unittest.TestCase):
    def test_exhausted_budget_returns_complete_board_and_warns_once(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING") as captured:
            board = generate_board(seed=8, max_attempts=25, validator=lambda board: False)

        self.assertEqual(len(captured.records), 1)
        self.assertIn("25 attempts", captured.records[0].getMessage())
        self.assertFalse(board.validated)
        self.assertTrue(board.is_fallback)
        self.assertEqual(board.attempts, 25)
        self.assertEqual(len(board.tiles), 19)
        self.assertTrue(validate_standard_counts(board))
        self.assertIsNone(board.tile(board.desert_position).token)

    def test_zero_budget_still_draws_one_candidate(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING"):
            board = generate_board(seed=8, max_attempts=0, validator=lambda board: False)
        self.assertEqual(board.attempts, 1)
        self.assertTrue(validate_standard_counts(board))

    def test_repeated_fallbacks_stay_structurally_complete(self) -> None:
        rng = random.Random(21)
        for _ in range(10):
            with self.assertLogs(LOGGER_NAME, level="WARNING"):
                board = generate_board(rng=rng, max_attempts=3, validator=lambda board: False)
            self.assertTrue(validate_standard_counts(board))

    def test_describe_outcome_mentions_fallback(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING"):
            board = generate_board(seed=8, max_attempts=2, validator=lambda board: False)
        self.assertIn("unvalidated", describe_outcome(board))
        accepted = generate_board(seed=8, validator=lambda board: True)
        self.assertEqual(describe_outcome(accepted), "Fair layout found after 1 attempt.")


if __name__ == "__main__":
    unittest.main()
