"""Piece — a colored chess piece with a mutable board position."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ichess.core.enums import Color, PieceType
from ichess.core.move_generator import Occupancy, generate_moves
from ichess.core.properties import DEFAULT_PROPERTIES, GameProperties
from ichess.core.types import EMPTY_SQUARE, Square, make_square

# Glyph character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# Glyph of an empty cell and of a piece without a side.
NO_PIECE = " "


class Piece:
    """A chess piece: fixed color and kind, movable position.

    Pieces compare by identity. Color and kind are set once at construction;
    use :meth:`set_position` to relocate the piece after a move.
    """

    __slots__ = ("_color", "_piece_type", "_position")

    def __init__(
        self,
        color: Color,
        piece_type: PieceType,
        position: Square = EMPTY_SQUARE,
    ) -> None:
        self._color = color
        self._piece_type = piece_type
        self.position = position

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def position(self) -> Square:
        return self._position

    @position.setter
    def position(self, sq: Square) -> None:
        self._position = make_square(sq.file, sq.rank)

    def __repr__(self) -> str:
        return f"Piece({self._color.name}, {self._piece_type.name}, {self.position})"

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def at(cls, piece_type: PieceType, file: str, rank: str, color: Color) -> Piece:
        """Create a piece on (*file*, *rank*); bad coordinates give the sentinel square."""
        piece = cls(color, piece_type)
        piece.set_position(file, rank)
        return piece

    @classmethod
    def from_char(cls, char: str, file: str = " ", rank: str = " ") -> Piece:
        """Create piece from its glyph, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls.at(ptype, file, rank, color)

    # ── Identity ─────────────────────────────────────────────────────────

    def is_white(self) -> bool:
        return self.color is Color.WHITE

    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def get_representation(self) -> str:
        """Kind letter: uppercase for white, lowercase for black, space otherwise."""
        if self.color is Color.WHITE:
            return self.piece_type.letter
        if self.color is Color.BLACK:
            return self.piece_type.letter.lower()
        return NO_PIECE

    def __str__(self) -> str:
        return self.get_representation()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE.get((self.color, self.piece_type), NO_PIECE)

    # ── Position ─────────────────────────────────────────────────────────

    def set_position(self, file: str, rank: str) -> None:
        """Move the piece; out-of-range input leaves it on the sentinel square."""
        self._position = make_square(file, rank)

    def get_position(self) -> tuple[str, str]:
        return self.position.file, self.position.rank

    # ── Move generation ──────────────────────────────────────────────────

    def available_moves(
        self,
        positions: Sequence[Square],
        colors: Sequence[Color],
        props: GameProperties = DEFAULT_PROPERTIES,
        out: list[Square] | None = None,
    ) -> list[Square]:
        """Destinations given the other pieces as parallel position/color sequences.

        If *out* is given it is cleared, refilled and returned.

        Raises:
            InvalidColorError: a pawn without a side was asked to move.
            ValueError: *positions* and *colors* differ in length.
        """
        occupancy = Occupancy.from_sequences(positions, colors)
        moves = generate_moves(
            self.piece_type, self.position, self.color, occupancy, props
        )
        if out is None:
            return moves
        out[:] = moves
        return out

    def moves(
        self,
        others: Iterable[Piece],
        props: GameProperties = DEFAULT_PROPERTIES,
        out: list[Square] | None = None,
    ) -> list[Square]:
        """Destinations given the other pieces as a collection of :class:`Piece`."""
        positions: list[Square] = []
        colors: list[Color] = []
        for other in others:
            if other is self:
                continue
            positions.append(other.position)
            colors.append(other.color)
        return self.available_moves(positions, colors, props, out)
