"""
Evaluation Module

Scoring rules for a board. The board delegates calculate_point() to an
Evaluator, so scoring can be swapped without touching the board.

Key Components:
    - Evaluator (ABC): score(board, color) and evaluate(board)
    - MaterialEvaluator: default point values with the doubled-pawn penalty

Data Flow:
    Board → evaluator.score(board, color) → float (pawns)
            evaluator.evaluate(board)     → float (White minus Black)
"""

from chess_board.evaluation.base import Evaluator
from chess_board.evaluation.material import MaterialEvaluator

__all__ = ['Evaluator', 'MaterialEvaluator']
