from recall.components.round_state import Phase
from recall.components.token import Color
from recall.events.bus import EVENT_COUNT_ADJUST, EVENT_SETTINGS_CHANGED
from recall.session import GameSession
from tests.helpers import capture, placing_session


def test_count_adjust_event_updates_settings():
    session = GameSession(white_count=2, black_count=2)
    changed = capture(session.event_bus, EVENT_SETTINGS_CHANGED)

    session.event_bus.emit(EVENT_COUNT_ADJUST, color=Color.BLACK, delta=3)
    session.event_bus.emit(EVENT_COUNT_ADJUST, color=Color.WHITE, delta=-5)
    session.event_bus.emit(EVENT_COUNT_ADJUST, color="white", delta=1)

    assert changed[-1] == {"white_count": 0, "black_count": 5}
    assert len(changed) == 2


def test_status_line_follows_round():
    session = placing_session()
    assert session.status_message() == "Time's up! Place the pieces now."
    session.check_answer()
    assert session.status_message().startswith("Game Over! You got 0 out of 4")


def test_malformed_count_adjust_is_ignored():
    session = GameSession(white_count=3, black_count=1)
    changed = capture(session.event_bus, EVENT_SETTINGS_CHANGED)

    session.event_bus.emit(EVENT_COUNT_ADJUST, color=Color.WHITE, delta="more")
    session.event_bus.emit(EVENT_COUNT_ADJUST, color=Color.WHITE)
    session.event_bus.emit(EVENT_COUNT_ADJUST, delta=1)

    assert changed == []
    assert session.current_phase() == Phase.SETUP
    assert (session.settings().white_count, session.settings().black_count) == (3, 1)
