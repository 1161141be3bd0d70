"""Timer-driven round flow: Setup -> Memorizing -> Placing -> Scored."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from esper import World

from recall.components.ground_truth import GroundTruth
from recall.components.round_settings import RoundSettings
from recall.components.round_state import Phase, RoundState
from recall.components.score import ScoreReport
from recall.components.token_catalog import TokenCatalog
from recall.components.user_placement import UserPlacement
from recall.errors import InvalidConfiguration
from recall.events.bus import (
    EVENT_CHECK_REQUEST,
    EVENT_COUNTDOWN_TICK,
    EVENT_ROUND_REJECTED,
    EVENT_ROUND_SCORED,
    EVENT_ROUND_START_REQUEST,
    EVENT_ROUND_STARTED,
    EventBus,
)
from recall.systems.countdown_system import CountdownSystem
from recall.systems.placement import generate_placement, validate_counts
from recall.systems.scoring import score_round
from recall.utils.round_state import optional_component, round_component, round_entity, set_phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickResult:
    remaining_seconds: int
    phase_changed: bool


class PhaseSystem:
    """Moves the round between phases and owns round start and scoring."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        countdown_system: CountdownSystem,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.countdown_system = countdown_system
        self._rng = rng or getattr(world, "random", None) or random.Random()

        self.event_bus.subscribe(EVENT_ROUND_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_CHECK_REQUEST, self._on_check_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_start_request(self, sender, **payload) -> None:
        settings = round_component(self.world, RoundSettings)
        white_count = payload.get("white_count")
        black_count = payload.get("black_count")
        if white_count is None:
            white_count = settings.white_count
        if black_count is None:
            black_count = settings.black_count
        try:
            white_count = int(white_count)
            black_count = int(black_count)
        except (TypeError, ValueError):
            return
        try:
            self.start_round(white_count, black_count)
        except InvalidConfiguration as exc:
            self.event_bus.emit(
                EVENT_ROUND_REJECTED,
                white_count=exc.white_count,
                black_count=exc.black_count,
                reason=str(exc),
            )

    def _on_check_request(self, sender, **payload) -> None:
        self.check_answer()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def start_round(self, white_count: int | None = None, black_count: int | None = None) -> None:
        """Generate a fresh ground truth and begin memorizing.

        Raises ``InvalidConfiguration`` before touching any state when the
        counts do not fit on the board.
        """
        settings = round_component(self.world, RoundSettings)
        if white_count is None:
            white_count = settings.white_count
        if black_count is None:
            black_count = settings.black_count
        try:
            validate_counts(white_count, black_count)
        except InvalidConfiguration:
            logger.info("Rejected round configuration: %d white, %d black", white_count, black_count)
            raise

        catalog = self._catalog()
        entries = generate_placement(white_count, black_count, rng=self._rng, catalog=catalog)

        self.countdown_system.cancel()
        entity = round_entity(self.world)
        settings.white_count = white_count
        settings.black_count = black_count
        self.world.add_component(entity, GroundTruth(entries=entries))
        if self.world.has_component(entity, ScoreReport):
            self.world.remove_component(entity, ScoreReport)
        round_component(self.world, UserPlacement).clear()
        state = round_component(self.world, RoundState)
        state.reset(settings.memorize_seconds)

        set_phase(self.world, self.event_bus, Phase.MEMORIZING)
        self.countdown_system.schedule(self._on_countdown_fire)
        logger.info(
            "Round started: %d white, %d black, %ds to memorize",
            white_count,
            black_count,
            state.remaining_seconds,
        )
        self.event_bus.emit(
            EVENT_ROUND_STARTED,
            white_count=white_count,
            black_count=black_count,
            remaining_seconds=state.remaining_seconds,
        )

    def on_tick(self) -> TickResult:
        """Advance the memorize countdown by one second.

        Each tick decrements the value and then reports it, so zero stays
        on screen for one full tick; a tick that finds zero ends memorization.
        """
        state = round_component(self.world, RoundState)
        if state.phase != Phase.MEMORIZING:
            return TickResult(state.remaining_seconds, False)
        if state.remaining_seconds <= 0:
            self.countdown_system.cancel()
            set_phase(self.world, self.event_bus, Phase.PLACING)
            logger.info("Memorization over; placement open")
            result = TickResult(0, True)
        else:
            state.remaining_seconds -= 1
            logger.debug("Countdown: %ds remaining", state.remaining_seconds)
            result = TickResult(state.remaining_seconds, False)
        self.event_bus.emit(
            EVENT_COUNTDOWN_TICK,
            remaining_seconds=result.remaining_seconds,
            phase_changed=result.phase_changed,
        )
        return result

    def check_answer(self) -> ScoreReport:
        """Score the round and freeze it.

        Outside an active round this returns the last report (or an empty
        one) without changing anything.
        """
        state = round_component(self.world, RoundState)
        if state.phase not in (Phase.MEMORIZING, Phase.PLACING):
            existing = optional_component(self.world, ScoreReport)
            return existing if existing is not None else ScoreReport()

        self.countdown_system.cancel()
        state.is_active = False
        state.selected_token = None
        truth = round_component(self.world, GroundTruth)
        placement = round_component(self.world, UserPlacement)
        report = score_round(truth.entries, placement.guesses)
        self.world.add_component(round_entity(self.world), report)
        set_phase(self.world, self.event_bus, Phase.SCORED)
        logger.info("Round scored: %d of %d correct", report.correct_count, report.total)
        self.event_bus.emit(EVENT_ROUND_SCORED, report=report)
        return report

    def dispose(self) -> None:
        self.countdown_system.cancel()
        state = round_component(self.world, RoundState)
        state.is_active = False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _on_countdown_fire(self) -> None:
        self.on_tick()

    def _catalog(self) -> TokenCatalog:
        catalog = optional_component(self.world, TokenCatalog)
        if catalog is None:
            catalog = TokenCatalog()
            self.world.create_entity(catalog)
        return catalog
