from dataclasses import dataclass

from recall.components.token import Color
from recall.constants import DEFAULT_BLACK_COUNT, DEFAULT_WHITE_COUNT, MEMORIZE_SECONDS


@dataclass(slots=True)
class RoundSettings:
    """Player-adjustable round configuration (token counts and memorize time).

    Counts are only clamped at zero here; the board capacity check happens
    when a round is started.
    """
    white_count: int = DEFAULT_WHITE_COUNT
    black_count: int = DEFAULT_BLACK_COUNT
    memorize_seconds: int = MEMORIZE_SECONDS

    def count_for(self, color: Color) -> int:
        return self.white_count if color == Color.WHITE else self.black_count

    def adjust(self, color: Color, delta: int) -> int:
        value = max(0, self.count_for(color) + int(delta))
        if color == Color.WHITE:
            self.white_count = value
        else:
            self.black_count = value
        return value
