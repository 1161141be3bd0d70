from dataclasses import dataclass

from recall.components.position import Position


@dataclass(slots=True)
class BoardSquare:
    """Per-square entity marker carrying the square's position."""
    position: Position
