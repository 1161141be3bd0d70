from __future__ import annotations

from typing import TYPE_CHECKING

from recall.components.control_button import ControlAction, ControlButton
from recall.components.round_settings import RoundSettings
from recall.components.round_state import Phase, RoundState
from recall.components.status_message import StatusMessage
from recall.components.token_catalog import TokenCatalog
from recall.constants import BOTTOM_MARGIN, CONTROL_BUTTON_WIDTH, TOP_MARGIN
from recall.rendering.board_renderer import draw_token
from recall.ui.controls import action_allowed
from recall.ui.layout import palette_rects
from recall.utils.clock import format_clock
from recall.utils.round_state import optional_component, round_component

if TYPE_CHECKING:
    from esper import World


class PanelRenderer:
    """Draws controls, the token palette, the timer and the status line."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window

    def render(self, arcade) -> None:
        state = round_component(self.world, RoundState)
        self._render_controls(arcade, state.phase)
        if state.phase == Phase.PLACING:
            self._render_palette(arcade, state)
        self._render_timer(arcade, state)
        self._render_message(arcade)

    def _render_controls(self, arcade, phase: Phase) -> None:
        settings = round_component(self.world, RoundSettings)
        for _, button in self.world.get_component(ControlButton):
            enabled = button.enabled and action_allowed(button.action, phase)
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = arcade.color.DARK_SLATE_BLUE if enabled else arcade.color.GRAY_BLUE
            text_color = arcade.color.WHITE if enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(
                left, bottom, button.width, button.height, text_color, border_width=2
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                text_color,
                18,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
            # The count sits midway between its stepper pair.
            if button.action in (ControlAction.WHITE_LESS, ControlAction.BLACK_LESS):
                is_white = button.action == ControlAction.WHITE_LESS
                count = settings.white_count if is_white else settings.black_count
                arcade.draw_text(
                    f"{'White' if is_white else 'Black'} {count}",
                    button.x - button.width / 2 + CONTROL_BUTTON_WIDTH / 2,
                    button.y,
                    arcade.color.WHITE,
                    14,
                    anchor_x="center",
                    anchor_y="center",
                )

    def _render_palette(self, arcade, state: RoundState) -> None:
        catalog = optional_component(self.world, TokenCatalog)
        if catalog is None:
            return
        rects = palette_rects(self.window.width, self.window.height, catalog.palette)
        for token, (left, bottom, width, height) in rects.items():
            selected = token == state.selected_token
            fill = arcade.color.GOLDENROD if selected else arcade.color.DARK_SLATE_GRAY
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
            draw_token(arcade, token, left + width / 2, bottom + height / 2, width)

    def _render_timer(self, arcade, state: RoundState) -> None:
        arcade.draw_text(
            format_clock(state.remaining_seconds),
            self.window.width / 2,
            self.window.height - TOP_MARGIN / 2,
            arcade.color.WHITE,
            24,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _render_message(self, arcade) -> None:
        message = round_component(self.world, StatusMessage).text
        if not message:
            return
        arcade.draw_text(
            message,
            self.window.width / 2,
            BOTTOM_MARGIN / 2,
            arcade.color.WHITE,
            16,
            anchor_x="center",
            anchor_y="center",
        )
