"""
Sliding Pieces: Rook, Bishop, Queen

A sliding piece reaches any square along one of its rays, at any distance,
as long as the ray stays on the board. Blocking is a separate question
answered by is_obstacle_in_path().
"""

from typing import List

from chess_board.board.position import Direction, Position
from chess_board.pieces.base import Piece, PieceSymbol, PositionLike


class SlidingPiece(Piece):
    """Base for pieces that repeat a direction step any number of times."""

    def verify_move_position(self, target: PositionLike) -> bool:
        origin = self._require_position()
        target = Position.coerce(target)

        for direction in self.get_directions():
            steps = 1
            while origin.is_valid_direction(direction, steps):
                if origin.add_pos(direction, steps) == target:
                    return True
                steps += 1
        return False


class Rook(SlidingPiece):
    kind = PieceSymbol.ROOK

    def get_directions(self) -> List[Direction]:
        return Direction.linear()


class Bishop(SlidingPiece):
    kind = PieceSymbol.BISHOP

    def get_directions(self) -> List[Direction]:
        return Direction.diagonal()


class Queen(SlidingPiece):
    kind = PieceSymbol.QUEEN

    def get_directions(self) -> List[Direction]:
        return Direction.every()
