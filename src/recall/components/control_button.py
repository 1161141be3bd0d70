"""Components for the round control buttons beside the board."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    START = auto()
    CHECK = auto()
    WHITE_MORE = auto()
    WHITE_LESS = auto()
    BLACK_MORE = auto()
    BLACK_LESS = auto()


@dataclass
class ControlButton:
    """Clickable button; x/y are the button centre in window coordinates."""
    label: str
    action: ControlAction
    x: float
    y: float
    width: float = 150.0
    height: float = 44.0
    enabled: bool = True

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= x <= self.x + half_w
            and self.y - half_h <= y <= self.y + half_h
        )
