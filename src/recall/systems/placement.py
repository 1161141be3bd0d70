"""Random ground-truth generation for a round."""
from __future__ import annotations

import random
from typing import Sequence, Tuple

from recall.components.position import ALL_POSITIONS, Position
from recall.components.token import Color, PlacementEntry
from recall.components.token_catalog import TokenCatalog
from recall.constants import BOARD_CAPACITY
from recall.errors import InvalidConfiguration


def validate_counts(white_count: int, black_count: int, capacity: int = BOARD_CAPACITY) -> None:
    """Raise ``InvalidConfiguration`` unless both counts fit on the board together."""
    if white_count < 0 or black_count < 0 or white_count + black_count > capacity:
        raise InvalidConfiguration(white_count, black_count, capacity)


def generate_placement(
    white_count: int,
    black_count: int,
    *,
    rng: random.Random,
    catalog: TokenCatalog,
    positions: Sequence[Position] = ALL_POSITIONS,
    weighted: bool | None = None,
) -> Tuple[PlacementEntry, ...]:
    """Assign ``white_count`` white and ``black_count`` black tokens to distinct squares.

    Squares are drawn without replacement from a uniform shuffle; every
    drawn square independently gets a token of the required color.
    """
    validate_counts(white_count, black_count, len(positions))
    shuffled = list(positions)
    rng.shuffle(shuffled)
    entries: list[PlacementEntry] = []
    for index, position in enumerate(shuffled[: white_count + black_count]):
        color = Color.WHITE if index < white_count else Color.BLACK
        entries.append(PlacementEntry(catalog.draw(color, rng, weighted=weighted), position))
    return tuple(entries)
