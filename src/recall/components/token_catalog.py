from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List

from recall.components.token import Color, TokenType


@dataclass(slots=True)
class TokenCatalog:
    """Canonical token definitions stored on a single registry entity.

    ``drawable`` lists the tokens placement may hand out (order preserved);
    ``palette`` is the order tokens are offered to the player.
    """
    drawable: List[TokenType] = field(default_factory=lambda: list(TokenType))
    palette: List[TokenType] = field(default_factory=list)
    weighted: bool = False

    def __post_init__(self) -> None:
        self.drawable = _dedupe(self.drawable) or list(TokenType)
        if not self.palette:
            # White row first, then black, major pieces before pawns.
            order = "RNBQKP"
            self.palette = sorted(
                TokenType,
                key=lambda t: (t.color != Color.WHITE, order.index(t.kind.value)),
            )

    def tokens_for(self, color: Color) -> List[TokenType]:
        return [token for token in self.drawable if token.color == color]

    def draw(self, color: Color, rng: random.Random, *, weighted: bool | None = None) -> TokenType:
        """Pick one token of ``color``; uniform unless weighted drawing is on."""
        candidates = self.tokens_for(color)
        if not candidates:
            raise ValueError(f"No drawable tokens for {color.name.lower()}")
        use_weights = self.weighted if weighted is None else weighted
        if use_weights:
            return rng.choices(candidates, weights=[t.weight for t in candidates], k=1)[0]
        return rng.choice(candidates)


def _dedupe(tokens: Iterable[TokenType]) -> List[TokenType]:
    seen: set[TokenType] = set()
    result: List[TokenType] = []
    for token in tokens:
        if isinstance(token, TokenType) and token not in seen:
            result.append(token)
            seen.add(token)
    return result
