"""GameSession: the owned round object a presentation layer drives."""
from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple

from esper import World

from recall.components.ground_truth import GroundTruth
from recall.components.position import Position
from recall.components.round_settings import RoundSettings
from recall.components.round_state import Phase, RoundState
from recall.components.score import ScoreReport
from recall.components.status_message import StatusMessage
from recall.components.token import PlacementEntry, TokenType
from recall.components.user_placement import UserPlacement
from recall.constants import DEFAULT_BLACK_COUNT, DEFAULT_WHITE_COUNT, MEMORIZE_SECONDS
from recall.events.bus import EVENT_TICK, EventBus
from recall.systems.countdown_system import CountdownSystem
from recall.systems.input_router import InputRouterSystem, PlacementResult
from recall.systems.phase_system import PhaseSystem, TickResult
from recall.systems.settings_system import SettingsSystem
from recall.systems.status_message_system import StatusMessageSystem
from recall.utils.board_view import visible_tokens
from recall.utils.round_state import optional_component, round_component
from recall.world import create_world

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the world, event bus and core systems for one player.

    Every state change goes through the systems, so presentation code can
    either call these methods directly or emit the matching bus events.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        rng: random.Random | None = None,
        memorize_seconds: int = MEMORIZE_SECONDS,
        weighted_draw: bool = False,
        white_count: int = DEFAULT_WHITE_COUNT,
        black_count: int = DEFAULT_BLACK_COUNT,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world: World = create_world(
            rng=rng,
            memorize_seconds=memorize_seconds,
            weighted_draw=weighted_draw,
            white_count=white_count,
            black_count=black_count,
        )
        self.countdown_system = CountdownSystem(self.world, self.event_bus)
        self.phase_system = PhaseSystem(self.world, self.event_bus, self.countdown_system)
        self.input_router = InputRouterSystem(self.world, self.event_bus)
        self.settings_system = SettingsSystem(self.world, self.event_bus)
        self.status_message_system = StatusMessageSystem(self.world, self.event_bus)
        self._disposed = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def configure_round(self, white_count: int, black_count: int) -> None:
        """Start a round with the given counts; raises ``InvalidConfiguration``."""
        self._ensure_open()
        self.phase_system.start_round(white_count, black_count)

    def start(self) -> None:
        """Start a round with the counts currently held in the settings."""
        self._ensure_open()
        self.phase_system.start_round()

    def tick(self, dt: float) -> None:
        """Feed ``dt`` seconds of wall-clock time to the countdown."""
        if self._disposed:
            return
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def dispose(self) -> None:
        if self._disposed:
            return
        self.phase_system.dispose()
        self.event_bus.clear()
        self.world.clear_database()
        self._disposed = True
        logger.debug("Session disposed")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def on_tick(self) -> TickResult:
        """Advance the countdown by exactly one second."""
        self._ensure_open()
        return self.phase_system.on_tick()

    def select_token(self, token: TokenType) -> Optional[TokenType]:
        self._ensure_open()
        return self.input_router.select_token(token)

    def place_token(self, position: Position) -> PlacementResult:
        self._ensure_open()
        return self.input_router.place_token(position)

    def check_answer(self) -> ScoreReport:
        self._ensure_open()
        return self.phase_system.check_answer()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def current_phase(self) -> Phase:
        return self._state().phase

    def remaining_seconds(self) -> int:
        return self._state().remaining_seconds

    def selected_token(self) -> Optional[TokenType]:
        return self._state().selected_token

    def current_ground_truth(self) -> Optional[Tuple[PlacementEntry, ...]]:
        """The round's true placement, only once the round has been scored."""
        if self._state().phase != Phase.SCORED:
            return None
        return round_component(self.world, GroundTruth).entries

    def current_user_placement(self) -> Dict[Position, TokenType]:
        return round_component(self.world, UserPlacement).snapshot()

    def score_report(self) -> Optional[ScoreReport]:
        return optional_component(self.world, ScoreReport)

    def settings(self) -> RoundSettings:
        return round_component(self.world, RoundSettings)

    def status_message(self) -> str:
        return round_component(self.world, StatusMessage).text

    def visible_tokens(self) -> Dict[Position, TokenType]:
        """Token the board shows on each square in the current phase."""
        return visible_tokens(self.world)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _state(self) -> RoundState:
        return round_component(self.world, RoundState)

    def _ensure_open(self) -> None:
        if self._disposed:
            raise RuntimeError("GameSession has been disposed")
