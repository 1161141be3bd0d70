from dataclasses import dataclass
from typing import Optional

from recall.utils.countdown import RepeatingTimer


@dataclass(slots=True)
class Countdown:
    """Holds the round's live repeating timer handle, if any."""
    timer: Optional[RepeatingTimer] = None

    @property
    def live(self) -> bool:
        return self.timer is not None and self.timer.active
