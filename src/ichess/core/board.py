"""Board - owns the pieces and a display grid derived from them."""

from __future__ import annotations

import heapq
import logging
import sys
from typing import TextIO

from ichess.core.enums import Color, PieceType
from ichess.core.piece import NO_PIECE, Piece
from ichess.core.properties import DEFAULT_PROPERTIES, GameProperties
from ichess.core.types import FILES, RANKS, Square, is_in_grid_range

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_BORDER = "  +" + "---+" * BOARD_SIZE
_FILE_LABELS = "    " + "   ".join(FILES)


def _grid_index(sq: Square) -> tuple[int, int]:
    """(row, col) of *sq* in the grid; row 0 is rank 8."""
    return BOARD_SIZE - 1 - RANKS.index(sq.rank), FILES.index(sq.file)


class Board:
    """Arena of pieces addressed by stable integer handles.

    Removing a piece frees its slot without renumbering the others; the next
    :meth:`add_piece` reuses the lowest free slot. A handle is valid until
    its piece is removed or the board is cleared (:meth:`clear`,
    :meth:`initialize_standard_setup`), after which it may name a different
    piece. The glyph grid is only refreshed by :meth:`update_grid`; it never
    feeds back into occupancy.
    """

    __slots__ = ("_slots", "_free", "_grid")

    def __init__(self) -> None:
        self._slots: list[Piece | None] = []
        self._free: list[int] = []  # min-heap of vacated handles
        self._grid: list[list[str]] = []
        self.clear_grid()

    # -- Ownership ----------------------------------------------------------

    def add_piece(self, piece: Piece) -> int:
        """Take ownership of *piece* and return its handle."""
        if self._free:
            handle = heapq.heappop(self._free)
            self._slots[handle] = piece
        else:
            self._slots.append(piece)
            handle = len(self._slots) - 1
        _LOGGER.debug("Added %r as handle %d", piece, handle)
        return handle

    def remove_piece(self, handle: int) -> Piece:
        """Drop the piece behind *handle* from the board and return it."""
        piece = self.piece(handle)
        self._slots[handle] = None
        heapq.heappush(self._free, handle)
        _LOGGER.debug("Removed %r (handle %d)", piece, handle)
        return piece

    def piece(self, handle: int) -> Piece:
        if 0 <= handle < len(self._slots):
            piece = self._slots[handle]
            if piece is not None:
                return piece
        raise KeyError(f"No piece with handle {handle}")

    def handles(self) -> list[int]:
        return [h for h, p in enumerate(self._slots) if p is not None]

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Live pieces, optionally only those of *color*."""
        return [
            p
            for p in self._slots
            if p is not None and (color is None or p.color is color)
        ]

    def piece_at(self, sq: Square) -> int | None:
        """Handle of the piece standing on *sq*, if any."""
        if not is_in_grid_range(sq):
            return None
        for handle, p in enumerate(self._slots):
            if p is not None and p.position == sq:
                return handle
        return None

    def __len__(self) -> int:
        return sum(1 for p in self._slots if p is not None)

    def clear(self) -> None:
        """Discard every piece and blank the grid."""
        self._slots = []
        self._free = []
        self.clear_grid()

    # -- Grid ---------------------------------------------------------------

    def clear_grid(self) -> None:
        self._grid = [[NO_PIECE] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def update_grid(self) -> None:
        """Recompute every grid cell from the current pieces."""
        self.clear_grid()
        for p in self._slots:
            if p is None or not is_in_grid_range(p.position):
                continue
            row, col = _grid_index(p.position)
            self._grid[row][col] = p.get_representation()
        _LOGGER.debug("Grid rebuilt from %d pieces", len(self))

    def glyph_at(self, sq: Square) -> str:
        """Grid glyph on *sq* as of the last :meth:`update_grid`."""
        if not is_in_grid_range(sq):
            return NO_PIECE
        row, col = _grid_index(sq)
        return self._grid[row][col]

    # -- Factory ------------------------------------------------------------

    def initialize_standard_setup(self) -> None:
        """Replace all pieces with the 32-piece starting position."""
        self.clear()
        for f, pt in zip(FILES, _BACK_RANK):
            self.add_piece(Piece.at(pt, f, "1", Color.WHITE))
            self.add_piece(Piece.at(PieceType.PAWN, f, "2", Color.WHITE))
            self.add_piece(Piece.at(PieceType.PAWN, f, "7", Color.BLACK))
            self.add_piece(Piece.at(pt, f, "8", Color.BLACK))
        self.update_grid()
        _LOGGER.debug("Standard setup placed %d pieces", len(self))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initialize_standard_setup()
        return b

    # -- Move queries -------------------------------------------------------

    def moves_for(
        self, handle: int, props: GameProperties = DEFAULT_PROPERTIES
    ) -> list[Square]:
        """Pseudo-legal destinations of the piece behind *handle*."""
        return self.piece(handle).moves(self.pieces(), props)

    def pseudo_legal_moves(
        self, color: Color, props: GameProperties = DEFAULT_PROPERTIES
    ) -> dict[int, list[Square]]:
        """Destinations for every piece of *color*, keyed by handle."""
        return {
            h: self.moves_for(h, props)
            for h in self.handles()
            if self.piece(h).color is color
        }

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        """Bordered ASCII diagram of the grid, rank 8 at the top."""
        lines: list[str] = []
        for row in range(BOARD_SIZE):
            lines.append(_BORDER)
            cells: list[str] = []
            for col in range(BOARD_SIZE):
                glyph = self._grid[row][col]
                if (row + col) % 2 == 0:
                    cells.append(f" {glyph} |")
                else:
                    cells.append(f"-{glyph}-|")
            lines.append(f"{BOARD_SIZE - row} |" + "".join(cells))
        lines.append(_BORDER)
        lines.append(_FILE_LABELS)
        return "\n".join(lines) + "\n"

    def display(self, stream: TextIO | None = None) -> None:
        """Write :meth:`render` to *stream* (stdout by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.render())

    def __repr__(self) -> str:
        return self.render()
