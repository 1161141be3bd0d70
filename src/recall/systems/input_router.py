from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from esper import World

from recall.components.position import Position
from recall.components.round_state import Phase, RoundState
from recall.components.token import TokenType
from recall.components.user_placement import UserPlacement
from recall.errors import NOT_SELECTABLE
from recall.events.bus import (
    EVENT_PALETTE_CLICK,
    EVENT_PLACEMENT_REJECTED,
    EVENT_SQUARE_CLICK,
    EVENT_TOKEN_PLACED,
    EVENT_TOKEN_SELECTED,
    EventBus,
)
from recall.utils.round_state import round_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacementResult:
    position: Position
    token: Optional[TokenType] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


class InputRouterSystem:
    """Turns token selection and square clicks into guesses."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PALETTE_CLICK, self.on_palette_click)
        self.event_bus.subscribe(EVENT_SQUARE_CLICK, self.on_square_click)

    def on_palette_click(self, sender, **payload) -> None:
        token = payload.get("token")
        if not isinstance(token, TokenType):
            return
        self.select_token(token)

    def on_square_click(self, sender, **payload) -> None:
        position = payload.get("position")
        if not isinstance(position, Position):
            return
        self.place_token(position)

    def select_token(self, token: TokenType) -> Optional[TokenType]:
        """Toggle ``token`` as the active selection; returns the active token."""
        if not isinstance(token, TokenType):
            raise TypeError(f"Expected TokenType, got {type(token).__name__}")
        state = round_component(self.world, RoundState)
        if state.phase != Phase.PLACING:
            return state.selected_token
        if state.selected_token == token:
            state.selected_token = None
        else:
            state.selected_token = token
        self.event_bus.emit(EVENT_TOKEN_SELECTED, token=state.selected_token)
        return state.selected_token

    def place_token(self, position: Position) -> PlacementResult:
        """Guess the selected token on ``position`` (last write wins)."""
        if not isinstance(position, Position):
            raise TypeError(f"Expected Position, got {type(position).__name__}")
        state = round_component(self.world, RoundState)
        token = state.selected_token
        if state.phase != Phase.PLACING or token is None:
            self.event_bus.emit(EVENT_PLACEMENT_REJECTED, position=position, reason=NOT_SELECTABLE)
            return PlacementResult(position=position, reason=NOT_SELECTABLE)
        previous = round_component(self.world, UserPlacement).place(position, token)
        logger.debug("Placed %s on %s", token, position)
        self.event_bus.emit(EVENT_TOKEN_PLACED, position=position, token=token, previous=previous)
        return PlacementResult(position=position, token=token)
