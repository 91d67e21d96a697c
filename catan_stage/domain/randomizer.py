from __future__ import annotations

import logging
import random
from typing import Optional

from .board import NUMBER_TOKENS, BoardAssignment, build_assignment, terrain_pool
from .rules import BoardPredicate, fairness_violations, is_fair_board

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 1000


def generate_board(
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    validator: Optional[BoardPredicate] = None,
) -> BoardAssignment:
    """Draw shuffled layouts until one passes the fairness rules.

    `rng` wins over `seed` when both are given. Once `max_attempts` candidates
    have been rejected the last one is returned with `validated=False` and a
    single warning is logged; this function never raises for an unlucky draw.
    """
    if rng is None:
        rng = random.Random(seed)
    accept = validator if validator is not None else is_fair_board
    attempt_budget = max(1, int(max_attempts))

    terrains = terrain_pool()
    candidate: Optional[BoardAssignment] = None
    for attempt in range(1, attempt_budget + 1):
        terrain_order = terrains[:]
        rng.shuffle(terrain_order)

        token_order = list(NUMBER_TOKENS)
        rng.shuffle(token_order)

        candidate = build_assignment(terrain_order, token_order, attempts=attempt)
        if accept(candidate):
            logger.debug("Accepted board layout after %d attempt(s).", attempt)
            return candidate

    assert candidate is not None
    logger.warning(
        "Board generation fell back to an unvalidated layout after %d attempts (violations: %s).",
        attempt_budget,
        ", ".join(fairness_violations(candidate)) or "none",
    )
    return BoardAssignment(tiles=candidate.tiles, attempts=attempt_budget, validated=False)


def describe_outcome(board: BoardAssignment) -> str:
    if board.validated:
        plural = "" if board.attempts == 1 else "s"
        return f"Fair layout found after {board.attempts} attempt{plural}."
    return (
        f"No fair layout within {board.attempts} attempts; "
        "showing the last candidate unvalidated."
    )
