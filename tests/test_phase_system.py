import random

import pytest

from recall.components.countdown import Countdown
from recall.components.ground_truth import GroundTruth
from recall.components.round_settings import RoundSettings
from recall.components.round_state import Phase
from recall.components.token import Color
from recall.errors import InvalidConfiguration
from recall.events.bus import (
    EVENT_PHASE_CHANGED,
    EVENT_ROUND_REJECTED,
    EVENT_ROUND_START_REQUEST,
    EVENT_ROUND_STARTED,
)
from recall.session import GameSession
from recall.utils.round_state import round_component
from tests.helpers import capture, drive_ticks


def _session(seconds=3, seed=1):
    return GameSession(rng=random.Random(seed), memorize_seconds=seconds)


def test_start_enters_memorizing_with_fresh_ground_truth():
    session = _session()
    started = capture(session.event_bus, EVENT_ROUND_STARTED)
    assert session.current_phase() == Phase.SETUP

    session.configure_round(2, 1)

    assert session.current_phase() == Phase.MEMORIZING
    assert session.remaining_seconds() == 3
    truth = round_component(session.world, GroundTruth)
    assert len(truth) == 3
    assert truth.count(Color.WHITE) == 2 and truth.count(Color.BLACK) == 1
    assert session.visible_tokens() == truth.as_mapping()
    assert session.current_ground_truth() is None, "Ground truth stays hidden until scored"
    assert session.current_user_placement() == {}
    assert started and started[-1]["white_count"] == 2


def test_zero_is_reported_for_a_full_tick_before_placing():
    session = _session(seconds=3)
    session.configure_round(1, 1)

    results = [session.on_tick() for _ in range(3)]
    assert [r.remaining_seconds for r in results] == [2, 1, 0]
    assert not any(r.phase_changed for r in results)
    assert session.current_phase() == Phase.MEMORIZING

    final = session.on_tick()
    assert final.phase_changed
    assert final.remaining_seconds == 0
    assert session.current_phase() == Phase.PLACING
    assert session.visible_tokens() == {}, "Ground truth is hidden once placing starts"

    after = session.on_tick()
    assert not after.phase_changed
    assert session.current_phase() == Phase.PLACING


def test_wall_clock_ticks_reach_placing_exactly_once():
    session = _session(seconds=3)
    changes = capture(session.event_bus, EVENT_PHASE_CHANGED)
    session.configure_round(2, 2)

    drive_ticks(session.event_bus, count=15, dt=0.25)
    assert session.current_phase() == Phase.MEMORIZING
    drive_ticks(session.event_bus, count=1, dt=0.25)
    assert session.current_phase() == Phase.PLACING

    drive_ticks(session.event_bus, count=40, dt=0.25)
    to_placing = [c for c in changes if c["new_phase"] == Phase.PLACING]
    assert len(to_placing) == 1
    assert not round_component(session.world, Countdown).live


def test_restart_while_memorizing_replaces_the_countdown():
    session = _session(seconds=3)
    session.configure_round(1, 1)
    session.tick(1.0)
    assert session.remaining_seconds() == 2
    old_timer = round_component(session.world, Countdown).timer

    session.configure_round(2, 2)

    assert not old_timer.active
    assert session.remaining_seconds() == 3
    session.tick(1.0)
    assert session.remaining_seconds() == 2, "Only one countdown may decrement the clock"


def test_invalid_configuration_leaves_round_untouched():
    session = _session()
    session.configure_round(2, 2)
    session.on_tick()
    truth_before = round_component(session.world, GroundTruth)
    remaining_before = session.remaining_seconds()

    with pytest.raises(InvalidConfiguration):
        session.configure_round(40, 30)

    assert round_component(session.world, GroundTruth) is truth_before
    assert session.remaining_seconds() == remaining_before
    assert session.current_phase() == Phase.MEMORIZING
    settings = round_component(session.world, RoundSettings)
    assert (settings.white_count, settings.black_count) == (2, 2)


def test_invalid_configuration_from_setup_stays_in_setup():
    session = _session()
    with pytest.raises(InvalidConfiguration):
        session.configure_round(65, 0)
    assert session.current_phase() == Phase.SETUP
    assert not round_component(session.world, Countdown).live


def test_start_request_event_reports_rejection():
    session = _session()
    rejected = capture(session.event_bus, EVENT_ROUND_REJECTED)
    settings = round_component(session.world, RoundSettings)
    settings.white_count = 40
    settings.black_count = 30

    session.event_bus.emit(EVENT_ROUND_START_REQUEST)

    assert rejected and rejected[-1]["white_count"] == 40
    assert session.current_phase() == Phase.SETUP
    assert session.status_message() == "Error: Too many pieces selected!"


def test_start_request_event_uses_settings():
    session = _session()
    settings = round_component(session.world, RoundSettings)
    settings.white_count = 3
    settings.black_count = 0

    session.event_bus.emit(EVENT_ROUND_START_REQUEST)

    assert session.current_phase() == Phase.MEMORIZING
    assert len(round_component(session.world, GroundTruth)) == 3
    assert session.status_message() == "Memorize the board!"


def test_empty_round_scores_zero_of_zero():
    session = _session()
    session.configure_round(0, 0)
    report = session.check_answer()
    assert (report.correct_count, report.total) == (0, 0)
    assert report.ratio == 0.0
    assert session.current_phase() == Phase.SCORED
    assert not round_component(session.world, Countdown).live


def test_check_in_setup_changes_nothing():
    session = _session()
    report = session.check_answer()
    assert (report.correct_count, report.total) == (0, 0)
    assert session.current_phase() == Phase.SETUP


def test_scored_round_can_restart():
    session = _session(seconds=0)
    session.configure_round(1, 1)
    session.on_tick()
    first = session.check_answer()
    assert session.check_answer() == first, "Repeated checks return the frozen report"
    assert session.current_ground_truth() == round_component(session.world, GroundTruth).entries

    session.configure_round(3, 3)

    assert session.current_phase() == Phase.MEMORIZING
    assert session.score_report() is None
    assert session.current_user_placement() == {}
    assert len(round_component(session.world, GroundTruth)) == 6


@pytest.mark.parametrize(
    "payload",
    [
        {"white_count": "lots"},
        {"black_count": object()},
        {"white_count": [2], "black_count": 1},
    ],
)
def test_start_request_with_malformed_counts_is_ignored(payload):
    session = _session()
    counts = (session.settings().white_count, session.settings().black_count)
    started = capture(session.event_bus, EVENT_ROUND_STARTED)
    rejected = capture(session.event_bus, EVENT_ROUND_REJECTED)

    session.event_bus.emit(EVENT_ROUND_START_REQUEST, **payload)

    assert session.current_phase() == Phase.SETUP
    assert started == [] and rejected == []
    assert (session.settings().white_count, session.settings().black_count) == counts
    assert round_component(session.world, GroundTruth).entries == ()
