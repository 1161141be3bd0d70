from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from recall.components.board_square import BoardSquare
from recall.components.position import Position
from recall.components.score import Classification, ScoreReport
from recall.components.token import Color, TokenType
from recall.constants import (
    CORRECT_SQUARE_COLOR,
    DARK_SQUARE_COLOR,
    INCORRECT_SQUARE_COLOR,
    LIGHT_SQUARE_COLOR,
)
from recall.ui.layout import square_rect

if TYPE_CHECKING:
    from esper import World


class BoardRenderer:
    """Draws the squares, the tokens the phase allows, and scoring tints."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window

    def render(self, arcade, tokens: Dict[Position, TokenType], report: ScoreReport | None) -> None:
        width, height = self.window.width, self.window.height
        for _, square in self.world.get_component(BoardSquare):
            position = square.position
            left, bottom, size, _ = square_rect(position, width, height)
            fill = DARK_SQUARE_COLOR if position.is_dark else LIGHT_SQUARE_COLOR
            if report is not None:
                classification = report.per_position.get(position)
                if classification == Classification.CORRECT:
                    fill = CORRECT_SQUARE_COLOR
                elif classification is not None:
                    fill = INCORRECT_SQUARE_COLOR
            arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, fill)

            token = tokens.get(position)
            if token is not None:
                draw_token(arcade, token, left + size / 2, bottom + size / 2, size)


def draw_token(arcade, token: TokenType, center_x: float, center_y: float, size: float) -> None:
    color = arcade.color.WHITE if token.color == Color.WHITE else arcade.color.BLACK
    shadow = arcade.color.BLACK if token.color == Color.WHITE else arcade.color.WHITE
    font_size = max(10, int(size * 0.55))
    # Offset outline so white glyphs stay readable on light squares.
    arcade.draw_text(
        token.symbol,
        center_x + 1,
        center_y - 1,
        shadow,
        font_size,
        anchor_x="center",
        anchor_y="center",
    )
    arcade.draw_text(
        token.symbol,
        center_x,
        center_y,
        color,
        font_size,
        anchor_x="center",
        anchor_y="center",
    )
