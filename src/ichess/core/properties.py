"""GameProperties — auxiliary game state threaded into move generation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ichess.core.enums import CastlingRights, Color, PieceType
from ichess.core.types import Square

# Rook home corners → the moved-flag they clear. Leaving or landing on one
# means that corner's rook can no longer castle.
_ROOK_CORNERS: dict[Square, str] = {
    Square("a", "1"): "white_queenside_rook_moved",
    Square("h", "1"): "white_kingside_rook_moved",
    Square("a", "8"): "black_queenside_rook_moved",
    Square("h", "8"): "black_kingside_rook_moved",
}


@dataclass(frozen=True, slots=True)
class GameProperties:
    """Immutable snapshot of check flags, moved flags and the last move.

    The default instance describes game start. ``last_move_start`` /
    ``last_move_end`` are ``None`` until a move is recorded, and
    ``turns_since_pawn_move`` stays ``None`` until the first pawn move, so a
    fresh record can never open an en-passant window.
    """

    white_king_in_check: bool = False
    black_king_in_check: bool = False

    white_king_moved: bool = False
    black_king_moved: bool = False
    white_queenside_rook_moved: bool = False
    white_kingside_rook_moved: bool = False
    black_queenside_rook_moved: bool = False
    black_kingside_rook_moved: bool = False

    last_move_start: Square | None = None
    last_move_end: Square | None = None
    turns_since_pawn_move: int | None = None

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def en_passant_window_open(self) -> bool:
        """Whether the previous ply was a pawn move with known endpoints."""
        return (
            self.turns_since_pawn_move == 0
            and self.last_move_start is not None
            and self.last_move_end is not None
        )

    @property
    def castling_rights(self) -> CastlingRights:
        rights = CastlingRights.NONE
        if not self.white_king_moved:
            if not self.white_kingside_rook_moved:
                rights |= CastlingRights.WHITE_KINGSIDE
            if not self.white_queenside_rook_moved:
                rights |= CastlingRights.WHITE_QUEENSIDE
        if not self.black_king_moved:
            if not self.black_kingside_rook_moved:
                rights |= CastlingRights.BLACK_KINGSIDE
            if not self.black_queenside_rook_moved:
                rights |= CastlingRights.BLACK_QUEENSIDE
        return rights

    def in_check(self, color: Color) -> bool:
        if color is Color.WHITE:
            return self.white_king_in_check
        if color is Color.BLACK:
            return self.black_king_in_check
        return False

    # ── Updating ─────────────────────────────────────────────────────────

    def with_move(
        self,
        start: Square,
        end: Square,
        piece_type: PieceType,
        color: Color,
    ) -> GameProperties:
        """Return the record describing the position after *start* → *end*."""
        changes: dict[str, object] = {
            "last_move_start": start,
            "last_move_end": end,
        }

        if piece_type is PieceType.PAWN:
            changes["turns_since_pawn_move"] = 0
        elif self.turns_since_pawn_move is not None:
            changes["turns_since_pawn_move"] = self.turns_since_pawn_move + 1

        if piece_type is PieceType.KING:
            if color is Color.WHITE:
                changes["white_king_moved"] = True
            elif color is Color.BLACK:
                changes["black_king_moved"] = True

        for sq in (start, end):
            flag = _ROOK_CORNERS.get(sq)
            if flag is not None:
                changes[flag] = True

        return replace(self, **changes)


DEFAULT_PROPERTIES = GameProperties()
