import random

import pytest

from recall.components.token import Color
from recall.components.token_catalog import TokenCatalog
from recall.errors import InvalidConfiguration
from recall.systems.placement import generate_placement, validate_counts


@pytest.mark.parametrize("white_count,black_count", [(0, 0), (5, 3), (1, 0), (0, 7), (32, 32), (64, 0)])
def test_generated_placement_matches_counts(white_count, black_count):
    entries = generate_placement(
        white_count, black_count, rng=random.Random(white_count * 100 + black_count), catalog=TokenCatalog()
    )
    assert len(entries) == white_count + black_count
    positions = [entry.position for entry in entries]
    assert len(set(positions)) == len(positions), "Two tokens share a square"
    assert sum(1 for entry in entries if entry.token.color == Color.WHITE) == white_count
    assert sum(1 for entry in entries if entry.token.color == Color.BLACK) == black_count


def test_same_seed_same_placement():
    first = generate_placement(6, 6, rng=random.Random(42), catalog=TokenCatalog())
    second = generate_placement(6, 6, rng=random.Random(42), catalog=TokenCatalog())
    assert first == second


def test_placement_spreads_over_the_board():
    rng = random.Random(7)
    catalog = TokenCatalog()
    seen = set()
    for _ in range(200):
        seen.update(entry.position for entry in generate_placement(4, 4, rng=rng, catalog=catalog))
    assert len(seen) == 64


@pytest.mark.parametrize("white_count,black_count", [(40, 30), (65, 0), (0, 65), (-1, 3)])
def test_invalid_counts_raise(white_count, black_count):
    rng = random.Random(0)
    state_before = rng.getstate()
    with pytest.raises(InvalidConfiguration):
        generate_placement(white_count, black_count, rng=rng, catalog=TokenCatalog())
    assert rng.getstate() == state_before, "Rejected configuration must not consume randomness"


def test_validate_counts_message_mentions_capacity():
    with pytest.raises(InvalidConfiguration) as excinfo:
        validate_counts(40, 30)
    assert "70" in str(excinfo.value)
    assert excinfo.value.capacity == 64
