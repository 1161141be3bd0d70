"""Factory and enablement rules for the round control buttons."""
from esper import World

from recall.components.control_button import ControlAction, ControlButton
from recall.components.round_state import Phase
from recall.constants import (
    BOARD_RANKS,
    CONTROL_BUTTON_HEIGHT,
    CONTROL_BUTTON_WIDTH,
    CONTROL_GAP,
    CONTROL_SMALL_BUTTON_SIZE,
    SIDE_GAP,
)
from recall.ui.layout import compute_board_geometry


def action_allowed(action: ControlAction, phase: Phase) -> bool:
    """Whether ``action`` can be used in ``phase``."""
    if action == ControlAction.CHECK:
        return phase == Phase.PLACING
    # Start and the count steppers are locked while the board is on show.
    return phase != Phase.MEMORIZING


def spawn_controls(world: World, width: int, height: int) -> list[int]:
    """Create the control buttons in a column left of the board."""
    size, start_x, start_y = compute_board_geometry(width, height)
    center_x = start_x - SIDE_GAP - CONTROL_BUTTON_WIDTH / 2
    top = start_y + size * BOARD_RANKS
    row_step = CONTROL_BUTTON_HEIGHT + CONTROL_GAP
    small = CONTROL_SMALL_BUTTON_SIZE
    # Stepper buttons sit at the column edges; the count is drawn between them.
    less_x = center_x - CONTROL_BUTTON_WIDTH / 2 + small / 2
    more_x = center_x + CONTROL_BUTTON_WIDTH / 2 - small / 2

    white_y = top - CONTROL_BUTTON_HEIGHT / 2
    black_y = white_y - row_step
    start_y_pos = black_y - row_step
    check_y = start_y_pos - row_step

    button_specs = (
        ("-", ControlAction.WHITE_LESS, less_x, white_y, small, small),
        ("+", ControlAction.WHITE_MORE, more_x, white_y, small, small),
        ("-", ControlAction.BLACK_LESS, less_x, black_y, small, small),
        ("+", ControlAction.BLACK_MORE, more_x, black_y, small, small),
        ("Start", ControlAction.START, center_x, start_y_pos, CONTROL_BUTTON_WIDTH, CONTROL_BUTTON_HEIGHT),
        ("Check", ControlAction.CHECK, center_x, check_y, CONTROL_BUTTON_WIDTH, CONTROL_BUTTON_HEIGHT),
    )
    entities: list[int] = []
    for label, action, x, y, button_width, button_height in button_specs:
        entities.append(
            world.create_entity(
                ControlButton(
                    label=label,
                    action=action,
                    x=x,
                    y=y,
                    width=button_width,
                    height=button_height,
                )
            )
        )
    return entities


def clear_controls(world: World) -> None:
    for entity in [ent for ent, _ in world.get_component(ControlButton)]:
        world.delete_entity(entity, immediate=True)
