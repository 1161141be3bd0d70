from __future__ import annotations

from typing import Dict

from esper import World

from recall.components.ground_truth import GroundTruth
from recall.components.position import Position
from recall.components.round_state import Phase, RoundState
from recall.components.score import ScoreReport
from recall.components.token import TokenType
from recall.components.user_placement import UserPlacement
from recall.utils.round_state import optional_component, round_component


def visible_tokens(world: World) -> Dict[Position, TokenType]:
    """Token shown on each square for the current phase.

    Memorizing shows the ground truth, placing shows the player's guesses,
    and a scored round shows the reveal from the score report.
    """
    phase = round_component(world, RoundState).phase
    if phase == Phase.MEMORIZING:
        return round_component(world, GroundTruth).as_mapping()
    if phase == Phase.PLACING:
        return round_component(world, UserPlacement).snapshot()
    if phase == Phase.SCORED:
        report = optional_component(world, ScoreReport)
        if report is None:
            return {}
        visible: Dict[Position, TokenType] = {}
        for position in report.per_position:
            token = report.revealed_token(position)
            if token is not None:
                visible[position] = token
        return visible
    return {}
