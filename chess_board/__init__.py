"""
Chess Board

A static chess board model: the standard starting position, ranks and
files, per-piece move geometry with obstacle detection, and material
scoring with a doubled-pawn penalty.

## Architecture

1. **board**: Grid primitives and the board aggregate
   - Position / Direction coordinates and step vectors
   - Rank and Board (initialization, lookup, movement, rendering)
   - python-chess, FEN and numpy tensor conversions

2. **pieces**: One movement implementation per piece kind
   - Sliding (rook, bishop, queen), stepping (king, knight), pawn, blank

3. **evaluation**: Material scoring
   - Evaluator interface and MaterialEvaluator

4. **utils**: Logging setup for host applications

Full game rules (check, castling, en passant, turn order) are left to the
caller, which builds legality from the geometric queries exposed here.

## Quick Start

```python
from chess_board import Board, Color

board = Board()
board.initialize()

knight = board.find_piece("b1")
knight.verify_move_position("c3")   # True
board.move("c3", knight)

print(board.show_board())
print(board.calculate_point(Color.WHITE))  # 38.0
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_board.board import Board, Direction, Position, Rank
from chess_board.config import BoardConfig
from chess_board.evaluation import Evaluator, MaterialEvaluator
from chess_board.exceptions import (
    ChessBoardError,
    IndexOutOfRangeError,
    InvalidPositionError,
)
from chess_board.pieces import Color, Piece, PieceSymbol, create_blank, create_piece
from chess_board.utils import setup_logger

__all__ = [
    'Board',
    'BoardConfig',
    'ChessBoardError',
    'Color',
    'Direction',
    'Evaluator',
    'IndexOutOfRangeError',
    'InvalidPositionError',
    'MaterialEvaluator',
    'Piece',
    'PieceSymbol',
    'Position',
    'Rank',
    'create_blank',
    'create_piece',
    'setup_logger',
]
