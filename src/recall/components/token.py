from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from recall.components.position import Position


class Color(Enum):
    WHITE = "w"
    BLACK = "b"


class TokenKind(Enum):
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    PAWN = "P"


# Relative draw weight per kind, used only by the weighted draw.
KIND_WEIGHTS = {
    TokenKind.KING: 1,
    TokenKind.QUEEN: 1,
    TokenKind.ROOK: 2,
    TokenKind.BISHOP: 2,
    TokenKind.KNIGHT: 2,
    TokenKind.PAWN: 8,
}


class TokenType(Enum):
    """The twelve placeable tokens; values are the short codes (``'wK'``)."""

    W_PAWN = "wP"
    W_ROOK = "wR"
    W_KNIGHT = "wN"
    W_BISHOP = "wB"
    W_QUEEN = "wQ"
    W_KING = "wK"
    B_PAWN = "bP"
    B_ROOK = "bR"
    B_KNIGHT = "bN"
    B_BISHOP = "bB"
    B_QUEEN = "bQ"
    B_KING = "bK"

    @property
    def code(self) -> str:
        return self.value

    @property
    def color(self) -> Color:
        return Color(self.value[0])

    @property
    def kind(self) -> TokenKind:
        return TokenKind(self.value[1])

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def weight(self) -> int:
        return KIND_WEIGHTS[self.kind]

    @staticmethod
    def from_code(code: str) -> "TokenType":
        try:
            return TokenType(code)
        except ValueError:
            raise ValueError(f"Unknown token code {code!r}") from None

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {
    TokenType.W_PAWN: "♙",
    TokenType.W_ROOK: "♖",
    TokenType.W_KNIGHT: "♘",
    TokenType.W_BISHOP: "♗",
    TokenType.W_QUEEN: "♕",
    TokenType.W_KING: "♔",
    TokenType.B_PAWN: "♟",
    TokenType.B_ROOK: "♜",
    TokenType.B_KNIGHT: "♞",
    TokenType.B_BISHOP: "♝",
    TokenType.B_QUEEN: "♛",
    TokenType.B_KING: "♚",
}


@dataclass(frozen=True, slots=True)
class PlacementEntry:
    """Ground-truth fact: ``token`` belongs on ``position``."""

    token: TokenType
    position: Position
