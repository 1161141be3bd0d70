from dataclasses import dataclass, field
from typing import Dict, Optional

from recall.components.position import Position
from recall.components.token import TokenType


@dataclass(slots=True)
class UserPlacement:
    """The player's current guesses; a missing square means it was left empty."""
    guesses: Dict[Position, TokenType] = field(default_factory=dict)

    def place(self, position: Position, token: TokenType) -> Optional[TokenType]:
        """Record a guess, returning whatever guess it replaced."""
        previous = self.guesses.get(position)
        self.guesses[position] = token
        return previous

    def clear(self) -> None:
        self.guesses.clear()

    def snapshot(self) -> Dict[Position, TokenType]:
        return dict(self.guesses)
