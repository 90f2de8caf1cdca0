"""Pseudo-legal move generation, one pure function per piece kind.

Every generator reads only its arguments: the origin square and color of
the moving piece, an :class:`Occupancy` snapshot of all *other* pieces and
the current :class:`GameProperties`. Results are lists of destination
squares; self-check is not filtered.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ichess.core.enums import Color, PieceType
from ichess.core.properties import DEFAULT_PROPERTIES, GameProperties
from ichess.core.types import Square, is_in_grid_range, offset

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# color -> (rank direction, starting rank)
_PAWN_RULES: dict[Color, tuple[int, str]] = {
    Color.WHITE: (1, "2"),
    Color.BLACK: (-1, "7"),
}


class InvalidColorError(ValueError):
    """A color-directed generator was asked to move a piece with no side."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"Invalid piece color: {color!r}")
        self.color = color


class Occupancy:
    """Read-only view of the other pieces on the board, keyed by square."""

    __slots__ = ("_colors",)

    def __init__(self, colors: dict[Square, Color] | None = None) -> None:
        self._colors: dict[Square, Color] = dict(colors) if colors else {}

    @classmethod
    def from_sequences(
        cls,
        positions: Sequence[Square],
        colors: Sequence[Color],
    ) -> Occupancy:
        """Build from the parallel position/color sequences."""
        if len(positions) != len(colors):
            raise ValueError(
                f"Parallel sequences differ in length: "
                f"{len(positions)} positions vs {len(colors)} colors"
            )
        return cls(dict(zip(positions, colors)))

    def __contains__(self, sq: object) -> bool:
        return sq in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def color_at(self, sq: Square) -> Color | None:
        """Color of the occupant of *sq*, or ``None`` if empty."""
        return self._colors.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._colors

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a real piece of a side other than *color*."""
        occupant = self._colors.get(sq)
        return occupant is not None and occupant is not Color.NONE and occupant is not color


# -- Stepping pieces ---------------------------------------------------------


def _step_moves(
    origin: Square,
    color: Color,
    occupancy: Occupancy,
    offsets: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    for df, dr in offsets:
        to_sq = offset(origin, df, dr)
        if not is_in_grid_range(to_sq):
            continue
        if occupancy.is_empty(to_sq) or occupancy.is_enemy(to_sq, color):
            moves.append(to_sq)
    return moves


def knight_moves(origin: Square, color: Color, occupancy: Occupancy) -> list[Square]:
    """The eight L-shaped jumps; nothing in between can block them."""
    return _step_moves(origin, color, occupancy, KNIGHT_OFFSETS)


def king_moves(origin: Square, color: Color, occupancy: Occupancy) -> list[Square]:
    """The eight adjacent squares. Check avoidance is the caller's job."""
    return _step_moves(origin, color, occupancy, KING_OFFSETS)


# -- Sliding pieces ----------------------------------------------------------


def _slide(
    origin: Square,
    color: Color,
    occupancy: Occupancy,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    for df, dr in directions:
        to_sq = offset(origin, df, dr)
        while is_in_grid_range(to_sq):
            if occupancy.is_empty(to_sq):
                moves.append(to_sq)
                to_sq = offset(to_sq, df, dr)
                continue
            if occupancy.is_enemy(to_sq, color):
                moves.append(to_sq)
            break
    return moves


def bishop_moves(origin: Square, color: Color, occupancy: Occupancy) -> list[Square]:
    return _slide(origin, color, occupancy, BISHOP_DIRS)


def rook_moves(origin: Square, color: Color, occupancy: Occupancy) -> list[Square]:
    return _slide(origin, color, occupancy, ROOK_DIRS)


def queen_moves(origin: Square, color: Color, occupancy: Occupancy) -> list[Square]:
    """Bishop rays followed by rook rays."""
    return bishop_moves(origin, color, occupancy) + rook_moves(
        origin, color, occupancy
    )


# -- Pawns -------------------------------------------------------------------


def pawn_moves(
    origin: Square,
    color: Color,
    occupancy: Occupancy,
    props: GameProperties = DEFAULT_PROPERTIES,
) -> list[Square]:
    """Pawn destinations in a fixed order.

    Order: single step, double step, capture toward file-1, capture toward
    file+1, en passant toward file-1, en passant toward file+1.

    En passant trusts *props*: if the last move is recorded as a double step
    past this pawn on the immediately preceding ply, the target is reported
    without checking that a pawn actually stands beside it.

    Raises:
        InvalidColorError: *color* is neither WHITE nor BLACK.
    """
    try:
        direction, start_rank = _PAWN_RULES[color]
    except KeyError:
        raise InvalidColorError(color) from None

    moves: list[Square] = []

    one_step = offset(origin, 0, direction)
    if is_in_grid_range(one_step) and occupancy.is_empty(one_step):
        moves.append(one_step)
        if origin.rank == start_rank:
            two_step = offset(origin, 0, 2 * direction)
            if is_in_grid_range(two_step) and occupancy.is_empty(two_step):
                moves.append(two_step)

    diagonals = [offset(origin, df, direction) for df in (-1, 1)]

    for target in diagonals:
        if is_in_grid_range(target) and occupancy.is_enemy(target, color):
            moves.append(target)

    if props.en_passant_window_open:
        for target in diagonals:
            if not is_in_grid_range(target):
                continue
            if (
                props.last_move_end == offset(target, 0, -direction)
                and props.last_move_start == offset(target, 0, direction)
            ):
                moves.append(target)

    return moves


# -- Dispatch ----------------------------------------------------------------


def generate_moves(
    piece_type: PieceType,
    origin: Square,
    color: Color,
    occupancy: Occupancy,
    props: GameProperties = DEFAULT_PROPERTIES,
) -> list[Square]:
    """Pseudo-legal destinations for a *piece_type* of *color* on *origin*."""
    match piece_type:
        case PieceType.PAWN:
            try:
                return pawn_moves(origin, color, occupancy, props)
            except InvalidColorError:
                _LOGGER.warning("Pawn on %s has no side: %r", origin, color)
                raise
        case PieceType.KNIGHT:
            return knight_moves(origin, color, occupancy)
        case PieceType.BISHOP:
            return bishop_moves(origin, color, occupancy)
        case PieceType.ROOK:
            return rook_moves(origin, color, occupancy)
        case PieceType.QUEEN:
            return queen_moves(origin, color, occupancy)
        case PieceType.KING:
            return king_moves(origin, color, occupancy)
    raise ValueError(f"Unknown piece type: {piece_type!r}")
