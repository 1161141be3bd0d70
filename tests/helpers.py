from __future__ import annotations

import random
from typing import Any

from recall.components.round_state import Phase
from recall.events.bus import EVENT_TICK, EventBus
from recall.session import GameSession


class DummyWindow:
    def __init__(self, width=960, height=720):
        self.width = width
        self.height = height


def drive_ticks(bus: EventBus, count: int = 4, dt: float = 1.0) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def capture(bus: EventBus, name: str) -> list[dict[str, Any]]:
    """Subscribe to ``name`` and collect every payload it emits."""
    received: list[dict[str, Any]] = []

    def _handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, _handler)
    return received


def placing_session(white_count: int = 2, black_count: int = 2, seed: int = 0) -> GameSession:
    """Session already past memorization, ready for guesses."""
    session = GameSession(rng=random.Random(seed), memorize_seconds=0)
    session.configure_round(white_count, black_count)
    session.on_tick()
    assert session.current_phase() == Phase.PLACING
    return session
