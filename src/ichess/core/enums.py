"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import Enum, IntFlag, auto


class Color(Enum):
    """Side color. ``NONE`` marks "no piece" in occupancy data."""

    NONE = " "
    WHITE = "w"
    BLACK = "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(Enum):
    """Piece kinds, valued by their (white) display letter."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

    @property
    def letter(self) -> str:
        return self.value


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH
