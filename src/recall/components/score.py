from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from recall.components.position import Position
from recall.components.token import TokenType


class Classification(Enum):
    CORRECT = "correct"
    WRONG_TOKEN = "wrong_token"
    MISSING = "missing"
    EXTRANEOUS = "extraneous"


@dataclass(frozen=True, slots=True)
class ScoreReport:
    """Outcome of a scored round.

    per_position: classification of every square that had a true token or a guess.
    expected: the true token per ground-truth square.
    guessed: the player's token per guessed square.
    """
    per_position: Dict[Position, Classification] = field(default_factory=dict)
    correct_count: int = 0
    total: int = 0
    expected: Dict[Position, TokenType] = field(default_factory=dict)
    guessed: Dict[Position, TokenType] = field(default_factory=dict)

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct_count / self.total

    def positions_with(self, classification: Classification) -> List[Position]:
        return sorted(
            position for position, value in self.per_position.items() if value == classification
        )

    def revealed_token(self, position: Position) -> TokenType | None:
        """Token to show on ``position`` after scoring.

        Correct and missing squares show the true token; wrong and
        extraneous squares keep the player's token.
        """
        classification = self.per_position.get(position)
        if classification in (Classification.CORRECT, Classification.MISSING):
            return self.expected.get(position)
        if classification in (Classification.WRONG_TOKEN, Classification.EXTRANEOUS):
            return self.guessed.get(position)
        return None

    def summary(self) -> str:
        return f"Game Over! You got {self.correct_count} out of {self.total} pieces correct!"
