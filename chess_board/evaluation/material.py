"""
Material Point Evaluation

Sums each piece's default point value:
    P=1.0, N=2.5, B=3.0, R=5.0, Q=9.0, K=0.0

Doubled pawns:
    Every pawn standing in a column that holds two or more pawns of the same
    color counts for its value divided by the configured divisor (half by
    default). Pawns in other columns keep full value, so moving a2 to b3
    from the starting position gives a pawn subtotal of 6 + 0.5 + 0.5 = 7.0.
"""

import logging
from typing import Set

import numpy as np

from chess_board.evaluation.base import Evaluator
from chess_board.pieces.base import Color

logger = logging.getLogger(__name__)


class MaterialEvaluator(Evaluator):
    """
    Material counting with a doubled-pawn penalty.

    Attributes:
        doubled_pawn_divisor: Divisor applied to each doubled pawn
    """

    def __init__(self, doubled_pawn_divisor: float = 2.0):
        if (
            isinstance(doubled_pawn_divisor, bool)
            or not isinstance(doubled_pawn_divisor, (int, float))
            or doubled_pawn_divisor <= 0
        ):
            raise ValueError(
                f"doubled_pawn_divisor must be positive, got {doubled_pawn_divisor!r}"
            )
        self.doubled_pawn_divisor = doubled_pawn_divisor

    def doubled_pawn_columns(self, board, color: Color) -> Set[int]:
        """Columns holding two or more pawns of *color*."""
        counts = board.pawn_column_counts(color)
        return {int(col) for col in np.flatnonzero(counts >= 2)}

    def score(self, board, color: Color) -> float:
        doubled = self.doubled_pawn_columns(board, color)

        total = 0.0
        for _, col, piece in board.squares():
            if not piece.match_color(color):
                continue

            value = piece.default_point
            if piece.equals_pawn(color) and col in doubled:
                value /= self.doubled_pawn_divisor
            total += value

        logger.debug(
            f"{color.name} material: {total:.1f} (doubled pawn columns: {sorted(doubled)})"
        )
        return total

    def __repr__(self) -> str:
        return f"MaterialEvaluator(doubled_pawn_divisor={self.doubled_pawn_divisor})"
