"""
Abstract Evaluator Interface

Scoring is kept behind a small interface so the board can swap scoring
rules without changing its own code.

Key Principles:
    1. Evaluators are stateless apart from their configuration
    2. score(board, color) returns points for one side, in pawns
    3. evaluate(board) returns White minus Black (positive = White ahead)
"""

from abc import ABC, abstractmethod

from chess_board.pieces.base import Color


class Evaluator(ABC):
    """
    Abstract base class for board scoring.

    Methods:
        score(board, color): Points for one side
        evaluate(board): Material balance from White's perspective
    """

    @abstractmethod
    def score(self, board, color: Color) -> float:
        """
        Score one side of the board.

        Args:
            board: Initialized Board
            color: Side to score

        Returns:
            float: Points in pawns
        """
        pass

    def evaluate(self, board) -> float:
        """
        Material balance from White's perspective.

        Args:
            board: Initialized Board

        Returns:
            float: White score minus Black score
        """
        return self.score(board, Color.WHITE) - self.score(board, Color.BLACK)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
