from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored elsewhere keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def clear(self):
        self._signals.clear()


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)
EVENT_COUNTDOWN_TICK = "countdown_tick"            # payload: remaining_seconds=int, phase_changed=bool


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_SQUARE_CLICK = "square_click"                # payload: position=Position
EVENT_PALETTE_CLICK = "palette_click"              # payload: token=TokenType
EVENT_COUNT_ADJUST = "count_adjust"                # payload: color=Color, delta=int


# ============================================================================
# ROUND FLOW
# ============================================================================
EVENT_ROUND_START_REQUEST = "round_start_request"  # payload: white_count=int|None, black_count=int|None
EVENT_ROUND_STARTED = "round_started"              # payload: white_count=int, black_count=int, remaining_seconds=int
EVENT_ROUND_REJECTED = "round_rejected"            # payload: white_count=int, black_count=int, reason=str
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous_phase=Phase, new_phase=Phase
EVENT_CHECK_REQUEST = "check_request"              # payload: None
EVENT_ROUND_SCORED = "round_scored"                # payload: report=ScoreReport


# ============================================================================
# PLACEMENT
# ============================================================================
EVENT_TOKEN_SELECTED = "token_selected"            # payload: token=TokenType|None
EVENT_TOKEN_PLACED = "token_placed"                # payload: position=Position, token=TokenType, previous=TokenType|None
EVENT_PLACEMENT_REJECTED = "placement_rejected"    # payload: position=Position, reason=str
EVENT_SETTINGS_CHANGED = "settings_changed"        # payload: white_count=int, black_count=int
