from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from recall.constants import BOARD_FILES, BOARD_RANKS


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """One of the 64 board squares, addressed by file letter and rank number."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if self.file not in BOARD_FILES or len(self.file) != 1:
            raise ValueError(f"Unknown file {self.file!r}")
        if not 1 <= self.rank <= BOARD_RANKS:
            raise ValueError(f"Unknown rank {self.rank!r}")

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``e4``."""
        return f"{self.file}{self.rank}"

    @property
    def file_index(self) -> int:
        return BOARD_FILES.index(self.file)

    @property
    def is_dark(self) -> bool:
        # a1 is dark.
        return (self.file_index + self.rank) % 2 == 1

    @staticmethod
    def from_name(name: str) -> "Position":
        """Create a position from algebraic notation (e.g. ``'e4'``)."""
        if not isinstance(name, str) or len(name) != 2 or not name[1].isdigit():
            raise ValueError(f"Unknown square {name!r}")
        return Position(name[0], int(name[1]))

    @staticmethod
    def from_indices(file_index: int, rank_index: int) -> "Position":
        """Zero-based column/row to position; row 0 is rank 1."""
        if not (0 <= file_index < len(BOARD_FILES) and 0 <= rank_index < BOARD_RANKS):
            raise ValueError(f"Square index out of range: ({file_index}, {rank_index})")
        return Position(BOARD_FILES[file_index], rank_index + 1)

    def __str__(self) -> str:
        return self.name


ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(file, rank) for rank in range(BOARD_RANKS, 0, -1) for file in BOARD_FILES
)
