from __future__ import annotations

from esper import World

from recall.components.round_state import Phase
from recall.components.score import ScoreReport
from recall.components.status_message import StatusMessage
from recall.events.bus import (
    EVENT_PHASE_CHANGED,
    EVENT_PLACEMENT_REJECTED,
    EVENT_ROUND_REJECTED,
    EVENT_ROUND_SCORED,
    EVENT_ROUND_STARTED,
    EVENT_TOKEN_PLACED,
    EventBus,
)
from recall.utils.round_state import round_component

MESSAGE_MEMORIZE = "Memorize the board!"
MESSAGE_PLACE = "Time's up! Place the pieces now."
MESSAGE_SELECT_FIRST = "First, select a piece from the side!"
MESSAGE_TOO_MANY = "Error: Too many pieces selected!"


class StatusMessageSystem:
    """Keeps the feedback line in sync with round events."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_ROUND_STARTED, self.on_round_started)
        self.event_bus.subscribe(EVENT_ROUND_REJECTED, self.on_round_rejected)
        self.event_bus.subscribe(EVENT_PHASE_CHANGED, self.on_phase_changed)
        self.event_bus.subscribe(EVENT_PLACEMENT_REJECTED, self.on_placement_rejected)
        self.event_bus.subscribe(EVENT_TOKEN_PLACED, self.on_token_placed)
        self.event_bus.subscribe(EVENT_ROUND_SCORED, self.on_round_scored)

    def on_round_started(self, sender, **payload) -> None:
        self._set(MESSAGE_MEMORIZE)

    def on_round_rejected(self, sender, **payload) -> None:
        self._set(MESSAGE_TOO_MANY)

    def on_phase_changed(self, sender, **payload) -> None:
        if payload.get("new_phase") == Phase.PLACING:
            self._set(MESSAGE_PLACE)

    def on_placement_rejected(self, sender, **payload) -> None:
        self._set(MESSAGE_SELECT_FIRST)

    def on_token_placed(self, sender, **payload) -> None:
        token = payload.get("token")
        position = payload.get("position")
        if token is None or position is None:
            return
        self._set(f"Placed {token} on {position}.")

    def on_round_scored(self, sender, **payload) -> None:
        report = payload.get("report")
        if isinstance(report, ScoreReport):
            self._set(report.summary())

    def _set(self, text: str) -> None:
        round_component(self.world, StatusMessage).text = text
