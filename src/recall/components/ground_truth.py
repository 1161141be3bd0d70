from dataclasses import dataclass
from typing import Dict, Tuple

from recall.components.position import Position
from recall.components.token import Color, PlacementEntry, TokenType


@dataclass(frozen=True, slots=True)
class GroundTruth:
    """Hidden correct placement for the current round. Replaced, never edited."""
    entries: Tuple[PlacementEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def as_mapping(self) -> Dict[Position, TokenType]:
        return {entry.position: entry.token for entry in self.entries}

    def count(self, color: Color) -> int:
        return sum(1 for entry in self.entries if entry.token.color == color)
