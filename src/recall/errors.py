"""Error types surfaced to callers of the game core."""
from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Requested token counts do not fit on the board."""

    def __init__(self, white_count: int, black_count: int, capacity: int) -> None:
        self.white_count = white_count
        self.black_count = black_count
        self.capacity = capacity
        if white_count < 0 or black_count < 0:
            detail = "token counts must not be negative"
        else:
            detail = f"{white_count + black_count} tokens requested but the board holds {capacity}"
        super().__init__(f"Invalid round configuration: {detail}")


# Reason string carried by rejected placements; placement never raises.
NOT_SELECTABLE = "not_selectable"
