from __future__ import annotations

from esper import World

from recall.components.round_settings import RoundSettings
from recall.components.token import Color
from recall.events.bus import EVENT_COUNT_ADJUST, EVENT_SETTINGS_CHANGED, EventBus
from recall.utils.round_state import round_component


class SettingsSystem:
    """Applies count adjustments from the control buttons to ``RoundSettings``."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_COUNT_ADJUST, self.on_count_adjust)

    def on_count_adjust(self, sender, **payload) -> None:
        color = payload.get("color")
        delta = payload.get("delta")
        if not isinstance(color, Color) or delta is None:
            return
        try:
            delta_int = int(delta)
        except (TypeError, ValueError):
            return
        settings = round_component(self.world, RoundSettings)
        settings.adjust(color, delta_int)
        self.event_bus.emit(
            EVENT_SETTINGS_CHANGED,
            white_count=settings.white_count,
            black_count=settings.black_count,
        )
