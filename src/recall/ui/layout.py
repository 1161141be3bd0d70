from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from recall.components.position import Position
from recall.components.token import Color, TokenType
from recall.constants import (
    BOARD_FILES,
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOARD_RANKS,
    BOTTOM_MARGIN,
    PALETTE_SWATCH_GAP,
    PALETTE_SWATCH_SIZE,
    SIDE_GAP,
    TOP_MARGIN,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height


def compute_board_geometry(window_width: int, window_height: int) -> Tuple[int, float, float]:
    """Return (square_size, start_x, start_y) for the board at this window size.

    Rank 1 is the bottom row and file ``a`` the left column.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    square_size = int(min(max_board_w / len(BOARD_FILES), max_board_h / BOARD_RANKS))
    if square_size < 20:
        square_size = 20
    total_width = len(BOARD_FILES) * square_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return square_size, start_x, start_y


def square_rect(position: Position, window_width: int, window_height: int) -> Rect:
    size, start_x, start_y = compute_board_geometry(window_width, window_height)
    left = start_x + position.file_index * size
    bottom = start_y + (position.rank - 1) * size
    return left, bottom, size, size


def square_at_point(x: float, y: float, window_width: int, window_height: int) -> Optional[Position]:
    size, start_x, start_y = compute_board_geometry(window_width, window_height)
    if x < start_x or x >= start_x + len(BOARD_FILES) * size:
        return None
    if y < start_y or y >= start_y + BOARD_RANKS * size:
        return None
    col = int((x - start_x) // size)
    row = int((y - start_y) // size)
    return Position.from_indices(col, row)


def palette_rects(
    window_width: int,
    window_height: int,
    tokens: Iterable[TokenType],
) -> Dict[TokenType, Rect]:
    """Swatch rectangles right of the board: white tokens left column, black right."""
    size, start_x, start_y = compute_board_geometry(window_width, window_height)
    board_top = start_y + BOARD_RANKS * size
    column_left = start_x + len(BOARD_FILES) * size + SIDE_GAP
    step = PALETTE_SWATCH_SIZE + PALETTE_SWATCH_GAP
    rects: Dict[TokenType, Rect] = {}
    rows = {Color.WHITE: 0, Color.BLACK: 0}
    for token in tokens:
        column = 0 if token.color == Color.WHITE else 1
        row = rows[token.color]
        rows[token.color] += 1
        left = column_left + column * step
        bottom = board_top - (row + 1) * step
        rects[token] = (left, bottom, PALETTE_SWATCH_SIZE, PALETTE_SWATCH_SIZE)
    return rects


def token_at_point(
    x: float,
    y: float,
    window_width: int,
    window_height: int,
    tokens: Iterable[TokenType],
) -> Optional[TokenType]:
    for token, (left, bottom, width, height) in palette_rects(window_width, window_height, tokens).items():
        if left <= x <= left + width and bottom <= y <= bottom + height:
            return token
    return None
