"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from ichess.core import Board, parse_square

    board = Board.initial()
    handle = board.piece_at(parse_square("g1"))
    print(board.moves_for(handle))
"""

from ichess.core.board import Board
from ichess.core.enums import CastlingRights, Color, PieceType
from ichess.core.move_generator import (
    InvalidColorError,
    Occupancy,
    bishop_moves,
    generate_moves,
    king_moves,
    knight_moves,
    pawn_moves,
    queen_moves,
    rook_moves,
)
from ichess.core.piece import Piece
from ichess.core.properties import DEFAULT_PROPERTIES, GameProperties
from ichess.core.types import (
    EMPTY_SQUARE,
    Square,
    is_in_grid_range,
    make_square,
    offset,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "EMPTY_SQUARE",
    "Square",
    "is_in_grid_range",
    "make_square",
    "offset",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "DEFAULT_PROPERTIES",
    "GameProperties",
    "Piece",
    # Move generation
    "InvalidColorError",
    "Occupancy",
    "bishop_moves",
    "generate_moves",
    "king_moves",
    "knight_moves",
    "pawn_moves",
    "queen_moves",
    "rook_moves",
]
