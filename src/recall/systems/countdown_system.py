from __future__ import annotations

import logging
from typing import Callable

from esper import World

from recall.components.countdown import Countdown
from recall.constants import COUNTDOWN_INTERVAL
from recall.events.bus import EVENT_TICK, EventBus
from recall.utils.countdown import RepeatingTimer
from recall.utils.round_state import round_component

logger = logging.getLogger(__name__)


class CountdownSystem:
    """Owns the single live countdown and feeds it frame time from ``EVENT_TICK``."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def schedule(
        self,
        callback: Callable[[], None],
        interval: float = COUNTDOWN_INTERVAL,
    ) -> RepeatingTimer:
        """Start a repeating timer, cancelling whichever one was live."""
        self.cancel()
        timer = RepeatingTimer(interval=interval, callback=callback)
        round_component(self.world, Countdown).timer = timer
        logger.debug("Countdown scheduled every %.2fs", interval)
        return timer

    def cancel(self) -> None:
        countdown = round_component(self.world, Countdown)
        if countdown.timer is not None:
            if countdown.timer.active:
                logger.debug("Countdown cancelled after %d ticks", countdown.timer.fired)
            countdown.timer.cancel()
            countdown.timer = None

    def on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt")
        if dt is None:
            return
        try:
            dt_value = float(dt)
        except (TypeError, ValueError):
            return
        timer = round_component(self.world, Countdown).timer
        if timer is None:
            return
        timer.advance(dt_value)
