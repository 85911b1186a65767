"""
Pieces Module

One Piece subclass per kind, all sharing a flat movement interface so the
board can ask any square's occupant the same geometric questions.

Key Components:
    - Piece (ABC): color, kind and position plus the movement interface
    - Rook, Bishop, Queen: sliding pieces (any distance along a ray)
    - King, Knight: single-step pieces (knights jump over obstacles)
    - Pawn: color-dependent forward moves and capture diagonals
    - Blank: colorless filler for empty squares
    - create_* factories for every (color, kind) combination

Data Flow:
    Board → piece.verify_move_position(target) → bool
          → piece.is_obstacle_in_path(target, board.occupied_positions()) → bool
"""

from chess_board.pieces.base import Color, Piece, PieceSymbol
from chess_board.pieces.blank import Blank
from chess_board.pieces.factory import (
    BACK_RANK,
    create_black_bishop,
    create_black_king,
    create_black_knight,
    create_black_pawn,
    create_black_queen,
    create_black_rook,
    create_blank,
    create_piece,
    create_white_bishop,
    create_white_king,
    create_white_knight,
    create_white_pawn,
    create_white_queen,
    create_white_rook,
)
from chess_board.pieces.pawn import Pawn
from chess_board.pieces.sliding import Bishop, Queen, Rook
from chess_board.pieces.stepping import King, Knight

__all__ = [
    'Color',
    'PieceSymbol',
    'Piece',
    'Pawn',
    'Rook',
    'Knight',
    'Bishop',
    'Queen',
    'King',
    'Blank',
    'BACK_RANK',
    'create_piece',
    'create_blank',
    'create_white_pawn',
    'create_white_knight',
    'create_white_bishop',
    'create_white_rook',
    'create_white_queen',
    'create_white_king',
    'create_black_pawn',
    'create_black_knight',
    'create_black_bishop',
    'create_black_rook',
    'create_black_queen',
    'create_black_king',
]
