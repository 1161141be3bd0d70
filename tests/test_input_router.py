import random

import pytest

from recall.components.position import Position
from recall.components.round_state import Phase
from recall.components.token import TokenType
from recall.errors import NOT_SELECTABLE
from recall.events.bus import (
    EVENT_PALETTE_CLICK,
    EVENT_PLACEMENT_REJECTED,
    EVENT_SQUARE_CLICK,
    EVENT_TOKEN_PLACED,
    EVENT_TOKEN_SELECTED,
)
from recall.session import GameSession
from tests.helpers import capture, placing_session

E4 = Position.from_name("e4")


def test_place_before_select_is_not_selectable():
    session = placing_session()
    rejected = capture(session.event_bus, EVENT_PLACEMENT_REJECTED)

    result = session.place_token(E4)

    assert not result.ok
    assert result.reason == NOT_SELECTABLE
    assert session.current_user_placement() == {}
    assert rejected and rejected[-1]["position"] == E4
    assert session.status_message() == "First, select a piece from the side!"


def test_place_outside_placing_is_not_selectable():
    session = GameSession(rng=random.Random(0), memorize_seconds=5)
    session.configure_round(2, 2)
    assert session.current_phase() == Phase.MEMORIZING

    assert session.select_token(TokenType.W_KING) is None, "Selection waits for the placing phase"
    result = session.place_token(E4)

    assert result.reason == NOT_SELECTABLE
    assert session.current_user_placement() == {}


def test_select_toggles_and_replaces():
    session = placing_session()
    selected = capture(session.event_bus, EVENT_TOKEN_SELECTED)

    assert session.select_token(TokenType.W_KING) == TokenType.W_KING
    assert session.select_token(TokenType.W_KING) is None
    assert session.select_token(TokenType.W_KING) == TokenType.W_KING
    assert session.select_token(TokenType.B_QUEEN) == TokenType.B_QUEEN
    assert session.selected_token() == TokenType.B_QUEEN
    assert [p["token"] for p in selected] == [
        TokenType.W_KING,
        None,
        TokenType.W_KING,
        TokenType.B_QUEEN,
    ]


def test_last_write_wins_on_a_square():
    session = placing_session()
    placed = capture(session.event_bus, EVENT_TOKEN_PLACED)

    session.select_token(TokenType.W_KING)
    first = session.place_token(E4)
    session.select_token(TokenType.B_QUEEN)
    second = session.place_token(E4)

    assert first.ok and first.token == TokenType.W_KING
    assert second.ok and second.token == TokenType.B_QUEEN
    assert session.current_user_placement() == {E4: TokenType.B_QUEEN}
    assert placed[-1]["previous"] == TokenType.W_KING
    assert session.status_message() == "Placed bQ on e4."


def test_selection_survives_multiple_placements():
    session = placing_session()
    session.select_token(TokenType.B_PAWN)
    for name in ("a2", "b2", "c2"):
        assert session.place_token(Position.from_name(name)).ok
    assert len(session.current_user_placement()) == 3


def test_router_rejects_wrong_argument_types():
    session = placing_session()
    with pytest.raises(TypeError):
        session.place_token("e4")
    with pytest.raises(TypeError):
        session.select_token("wK")


def test_malformed_click_payloads_are_ignored():
    session = placing_session()
    session.select_token(TokenType.B_ROOK)
    selected = capture(session.event_bus, EVENT_TOKEN_SELECTED)
    placed = capture(session.event_bus, EVENT_TOKEN_PLACED)
    rejected = capture(session.event_bus, EVENT_PLACEMENT_REJECTED)

    session.event_bus.emit(EVENT_PALETTE_CLICK, token="wK")
    session.event_bus.emit(EVENT_PALETTE_CLICK)
    session.event_bus.emit(EVENT_SQUARE_CLICK, position="e4")
    session.event_bus.emit(EVENT_SQUARE_CLICK, position=(4, 3))
    session.event_bus.emit(EVENT_SQUARE_CLICK)

    assert session.current_phase() == Phase.PLACING
    assert session.selected_token() == TokenType.B_ROOK
    assert session.current_user_placement() == {}
    assert selected == [] and placed == [] and rejected == []
