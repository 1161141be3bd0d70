import random

from esper import World

from recall.components.board_square import BoardSquare
from recall.components.countdown import Countdown
from recall.components.ground_truth import GroundTruth
from recall.components.position import ALL_POSITIONS
from recall.components.round_settings import RoundSettings
from recall.components.round_state import RoundState
from recall.components.status_message import StatusMessage
from recall.components.token_catalog import TokenCatalog
from recall.components.user_placement import UserPlacement
from recall.constants import DEFAULT_BLACK_COUNT, DEFAULT_WHITE_COUNT, MEMORIZE_SECONDS


def create_world(
    *,
    rng: random.Random | None = None,
    memorize_seconds: int = MEMORIZE_SECONDS,
    weighted_draw: bool = False,
    white_count: int = DEFAULT_WHITE_COUNT,
    black_count: int = DEFAULT_BLACK_COUNT,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Round singletons live together on one entity.
    world.create_entity(
        RoundState(),
        GroundTruth(),
        UserPlacement(),
        Countdown(),
        RoundSettings(
            white_count=max(0, int(white_count)),
            black_count=max(0, int(black_count)),
            memorize_seconds=max(0, int(memorize_seconds)),
        ),
        StatusMessage(),
    )

    # Single registry entity with the token catalog.
    world.create_entity(TokenCatalog(weighted=weighted_draw))

    for position in ALL_POSITIONS:
        world.create_entity(BoardSquare(position=position))
    return world
