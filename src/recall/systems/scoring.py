from __future__ import annotations

from typing import Iterable, Mapping

from recall.components.position import Position
from recall.components.score import Classification, ScoreReport
from recall.components.token import PlacementEntry, TokenType


def score_round(
    ground_truth: Iterable[PlacementEntry],
    guesses: Mapping[Position, TokenType],
) -> ScoreReport:
    """Classify every ground-truth square and every stray guess.

    Neither input is modified; ``guesses`` is copied before the pass.
    """
    remaining = dict(guesses)
    per_position: dict[Position, Classification] = {}
    expected: dict[Position, TokenType] = {}
    correct_count = 0
    total = 0

    for entry in ground_truth:
        total += 1
        expected[entry.position] = entry.token
        guess = remaining.pop(entry.position, None)
        if guess is None:
            per_position[entry.position] = Classification.MISSING
        elif guess == entry.token:
            per_position[entry.position] = Classification.CORRECT
            correct_count += 1
        else:
            per_position[entry.position] = Classification.WRONG_TOKEN

    # Whatever is left was placed on a square that should have stayed empty.
    for position in remaining:
        per_position[position] = Classification.EXTRANEOUS

    return ScoreReport(
        per_position=per_position,
        correct_count=correct_count,
        total=total,
        expected=expected,
        guessed=dict(guesses),
    )
