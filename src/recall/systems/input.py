from esper import World

from recall.components.control_button import ControlAction, ControlButton
from recall.components.round_state import Phase, RoundState
from recall.components.token import Color
from recall.components.token_catalog import TokenCatalog
from recall.events.bus import (
    EVENT_CHECK_REQUEST,
    EVENT_COUNT_ADJUST,
    EVENT_MOUSE_PRESS,
    EVENT_PALETTE_CLICK,
    EVENT_ROUND_START_REQUEST,
    EVENT_SQUARE_CLICK,
    EventBus,
)
from recall.ui.controls import action_allowed
from recall.ui.layout import square_at_point, token_at_point
from recall.utils.round_state import optional_component, round_component

_COUNT_STEPS = {
    ControlAction.WHITE_MORE: (Color.WHITE, 1),
    ControlAction.WHITE_LESS: (Color.WHITE, -1),
    ControlAction.BLACK_MORE: (Color.BLACK, 1),
    ControlAction.BLACK_LESS: (Color.BLACK, -1),
}


class InputSystem:
    """Maps left clicks to control, palette and board events."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button (1) interacts with the game.
        if button != 1:
            return
        phase = round_component(self.world, RoundState).phase

        for _, control in self.world.get_component(ControlButton):
            if control.contains(x, y):
                if control.enabled and action_allowed(control.action, phase):
                    self._activate(control.action)
                return

        if phase == Phase.PLACING:
            catalog = optional_component(self.world, TokenCatalog)
            palette = catalog.palette if catalog is not None else []
            token = token_at_point(x, y, self.window.width, self.window.height, palette)
            if token is not None:
                self.event_bus.emit(EVENT_PALETTE_CLICK, token=token)
                return

        position = square_at_point(x, y, self.window.width, self.window.height)
        if position is not None:
            self.event_bus.emit(EVENT_SQUARE_CLICK, position=position)

    def _activate(self, action: ControlAction) -> None:
        if action == ControlAction.START:
            self.event_bus.emit(EVENT_ROUND_START_REQUEST)
        elif action == ControlAction.CHECK:
            self.event_bus.emit(EVENT_CHECK_REQUEST)
        elif action in _COUNT_STEPS:
            color, delta = _COUNT_STEPS[action]
            self.event_bus.emit(EVENT_COUNT_ADJUST, color=color, delta=delta)
