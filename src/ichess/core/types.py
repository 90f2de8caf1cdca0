"""Square value object and coordinate helpers.

Squares use algebraic characters directly: ``file`` is ``'a'``–``'h'`` and
``rank`` is ``'1'``–``'8'``. Arithmetic on the characters can step past the
board edge, so every computed square must pass :func:`is_in_grid_range`
before it is reported or looked up.
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A (file, rank) coordinate pair, e.g. ``Square("e", "4")``."""

    file: str
    rank: str

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


# Canonical "invalid / off the board" square.
EMPTY_SQUARE = Square(" ", " ")


def is_in_grid_range(sq: Square) -> bool:
    """True iff both coordinates are on the 8x8 board."""
    return (
        len(sq.file) == 1
        and len(sq.rank) == 1
        and "a" <= sq.file <= "h"
        and "1" <= sq.rank <= "8"
    )


def make_square(file: str, rank: str) -> Square:
    """Create a square, collapsing any out-of-range input to :data:`EMPTY_SQUARE`."""
    sq = Square(file, rank)
    if not is_in_grid_range(sq):
        return EMPTY_SQUARE
    return sq


def offset(sq: Square, d_file: int, d_rank: int) -> Square:
    """Shift *sq* by a file/rank delta. The result may be off the board."""
    return Square(chr(ord(sq.file) + d_file), chr(ord(sq.rank) + d_rank))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square('e', '4')."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(name[0], name[1])


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 'e4'; the sentinel renders as two spaces."""
    return str(sq)
