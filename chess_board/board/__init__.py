"""
Board Module

This module holds the grid primitives and the board aggregate.

Key Components:
    - Position / Direction: grid coordinates and step vectors
    - Rank: one row of 8 pieces
    - Board: 8 ranks plus initialization, lookup, movement, scoring and
      text rendering
    - representation: python-chess, FEN and numpy tensor conversions

Data Flow:
    Board → Rank → Piece → Position / Direction
"""

from chess_board.board.position import Direction, Position
from chess_board.board.rank import Rank
from chess_board.board.board import Board
from chess_board.board.representation import (
    board_to_python_chess,
    board_to_tensor,
    fen_to_board,
    python_chess_to_board,
    tensor_to_board,
)

__all__ = [
    'Board',
    'Direction',
    'Position',
    'Rank',
    'board_to_python_chess',
    'board_to_tensor',
    'fen_to_board',
    'python_chess_to_board',
    'tensor_to_board',
]
