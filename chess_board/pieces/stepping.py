"""
Stepping Pieces: King, Knight

Both kinds move exactly one application of a catalog vector. The knight's
catalog is its complete jump set, and because it jumps, only an occupied
destination can block it.
"""

from typing import Iterable, List

from chess_board.board.position import Direction, Position
from chess_board.pieces.base import Piece, PieceSymbol, PositionLike


class SteppingPiece(Piece):
    """Base for pieces whose moves are a single catalog step."""

    def verify_move_position(self, target: PositionLike) -> bool:
        return Position.coerce(target) in self.reachable_positions()


class King(SteppingPiece):
    kind = PieceSymbol.KING

    def get_directions(self) -> List[Direction]:
        return Direction.every()


class Knight(SteppingPiece):
    kind = PieceSymbol.KNIGHT

    def get_directions(self) -> List[Direction]:
        return Direction.knight()

    def is_obstacle_in_path(
        self, target: PositionLike, obstacles: Iterable[PositionLike]
    ) -> bool:
        """Knights jump, so only the destination itself can be blocked."""
        target = Position.coerce(target)
        return any(Position.coerce(p) == target for p in obstacles)
