"""Blank square placeholder."""

from typing import Iterable, List

from chess_board.board.position import Direction
from chess_board.pieces.base import Color, Piece, PieceSymbol, PositionLike


class Blank(Piece):
    """Colorless filler for empty squares. It never moves."""

    kind = PieceSymbol.BLANK

    def __init__(self, position=None):
        super().__init__(Color.NONE, position)

    def get_directions(self) -> List[Direction]:
        return []

    def verify_move_position(self, target: PositionLike) -> bool:
        return False

    def is_obstacle_in_path(
        self, target: PositionLike, obstacles: Iterable[PositionLike]
    ) -> bool:
        return False
