"""
Pawn Movement

Pawns have three geometric moves:
    1. One square forward
    2. Two squares forward, only from the starting row
    3. One square diagonally forward (capture-shaped)

The diagonal is reported as reachable whether or not a capture is
available; the caller combines this with board contents.

Forward is north (decreasing row) for White and south for Black.
"""

from typing import List

from chess_board.board.position import Direction, Position
from chess_board.pieces.base import Color, Piece, PieceSymbol, PositionLike

# Row index of each side's pawn rank (rank 2 for White, rank 7 for Black)
START_ROWS = {
    Color.WHITE: 6,
    Color.BLACK: 1,
}


class Pawn(Piece):
    kind = PieceSymbol.PAWN

    def __init__(self, color: Color, position=None):
        if color not in START_ROWS:
            raise ValueError(f"Pawn must be WHITE or BLACK, got {color}")
        super().__init__(color, position)

    def get_directions(self) -> List[Direction]:
        if self.color == Color.WHITE:
            return Direction.white_pawn()
        return Direction.black_pawn()

    @property
    def forward(self) -> Direction:
        return self.get_directions()[0]

    def is_on_start_row(self) -> bool:
        return self._require_position().row == START_ROWS[self.color]

    def verify_move_position(self, target: PositionLike) -> bool:
        origin = self._require_position()
        target = Position.coerce(target)

        if (
            self.is_on_start_row()
            and origin.is_valid_direction(self.forward, 2)
            and origin.add_pos(self.forward, 2) == target
        ):
            return True

        return target in self.reachable_positions()
