import random
from collections import Counter

import pytest

from recall.components.token import Color, TokenKind, TokenType
from recall.components.token_catalog import TokenCatalog


def test_palette_lists_white_then_black():
    catalog = TokenCatalog()
    assert len(catalog.palette) == 12
    assert all(token.color == Color.WHITE for token in catalog.palette[:6])
    assert all(token.color == Color.BLACK for token in catalog.palette[6:])
    assert catalog.palette[0] == TokenType.W_ROOK


def test_uniform_draw_only_returns_requested_color():
    catalog = TokenCatalog()
    rng = random.Random(3)
    drawn = Counter(catalog.draw(Color.BLACK, rng) for _ in range(600))
    assert set(drawn) == set(catalog.tokens_for(Color.BLACK))


def test_weighted_draw_favours_pawns():
    catalog = TokenCatalog(weighted=True)
    rng = random.Random(5)
    drawn = Counter(catalog.draw(Color.WHITE, rng).kind for _ in range(2000))
    assert drawn[TokenKind.PAWN] > 3 * drawn[TokenKind.KING]
    assert drawn[TokenKind.PAWN] > 3 * drawn[TokenKind.QUEEN]


def test_restricted_drawable_set():
    catalog = TokenCatalog(drawable=[TokenType.W_KING, TokenType.W_KING, TokenType.B_QUEEN])
    assert catalog.drawable == [TokenType.W_KING, TokenType.B_QUEEN]
    rng = random.Random(0)
    assert {catalog.draw(Color.WHITE, rng) for _ in range(20)} == {TokenType.W_KING}
    with pytest.raises(ValueError):
        TokenCatalog(drawable=[TokenType.W_KING]).draw(Color.BLACK, rng)
