"""Round state resource describing the active phase of play."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from recall.components.token import TokenType


class Phase(Enum):
    """Phases of a round; input and display rules depend on the phase."""
    SETUP = auto()
    MEMORIZING = auto()
    PLACING = auto()
    SCORED = auto()


@dataclass(slots=True)
class RoundState:
    """Singleton component storing the live round state."""
    phase: Phase = Phase.SETUP
    is_active: bool = False
    selected_token: Optional[TokenType] = None
    remaining_seconds: int = 0

    def reset(self, remaining_seconds: int) -> None:
        self.is_active = True
        self.selected_token = None
        self.remaining_seconds = remaining_seconds
