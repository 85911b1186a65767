"""
Board State

The board owns 8 ranks of 8 pieces each. Empty squares hold a Blank piece,
so every square always has an occupant.

Per-color piece lists are derived from the grid on every access rather than
stored separately, so they can never drift from the squares (no duplicates,
no stale entries after a move or overwrite).

Lifecycle:
    Board() → initialize() or initialize_empty() → move() / queries

Rank order (as stored and rendered, top to bottom):
    0: Black back rank   (rank 8)
    1: Black pawns       (rank 7)
    2-5: Blank           (ranks 6-3)
    6: White pawns       (rank 2)
    7: White back rank   (rank 1)
"""

import logging
from typing import Iterator, List, Optional, Tuple

import chess
import numpy as np

from chess_board.board.position import BOARD_SIZE, Position
from chess_board.board.rank import Rank, check_index
from chess_board.config import BoardConfig
from chess_board.evaluation.base import Evaluator
from chess_board.evaluation.material import MaterialEvaluator
from chess_board.exceptions import IndexOutOfRangeError
from chess_board.pieces.base import Color, Piece, PieceSymbol, PositionLike
from chess_board.pieces.factory import BACK_RANK, create_blank, create_piece

logger = logging.getLogger(__name__)

BLANK_RANK_COUNT = 4


class Board:
    """
    8x8 grid of pieces with scoring and text rendering.

    The board does not enforce game rules. Callers decide legality from
    Piece.verify_move_position() and Piece.is_obstacle_in_path() before
    calling move().

    Attributes:
        config: Rendering and scoring settings
        evaluator: Scoring strategy used by calculate_point()
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        evaluator: Optional[Evaluator] = None,
    ):
        self.config = config if config else BoardConfig()
        self.evaluator = (
            evaluator
            if evaluator
            else MaterialEvaluator(self.config.doubled_pawn_divisor)
        )
        self._ranks: List[Rank] = []

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Set up the standard 32-piece starting position."""
        self._ranks = [
            self._back_rank(Color.BLACK),
            self._pawn_rank(Color.BLACK),
        ]
        self._ranks.extend(self._blank_rank() for _ in range(BLANK_RANK_COUNT))
        self._ranks.append(self._pawn_rank(Color.WHITE))
        self._ranks.append(self._back_rank(Color.WHITE))

        self._place_positions()
        logger.info(f"Board initialized with {self.piece_count()} pieces")

    def initialize_empty(self) -> None:
        """Clear the board to 8 ranks of Blank pieces."""
        self._ranks = [self._blank_rank() for _ in range(BOARD_SIZE)]
        self._place_positions()
        logger.info("Board initialized empty")

    def _back_rank(self, color: Color) -> Rank:
        return Rank([create_piece(color, kind) for kind in BACK_RANK])

    def _pawn_rank(self, color: Color) -> Rank:
        return Rank([create_piece(color, PieceSymbol.PAWN) for _ in range(BOARD_SIZE)])

    def _blank_rank(self) -> Rank:
        return Rank([create_blank() for _ in range(BOARD_SIZE)])

    def _place_positions(self) -> None:
        for row, col, piece in self.squares():
            piece.position = Position(row, col)

    @property
    def is_initialized(self) -> bool:
        return len(self._ranks) == BOARD_SIZE

    @property
    def ranks(self) -> List[Rank]:
        return list(self._ranks)

    def _rank(self, row: int) -> Rank:
        check_index(row, "row")
        if not self.is_initialized:
            raise IndexOutOfRangeError(
                "Board has no ranks; call initialize() or initialize_empty() first"
            )
        return self._ranks[row]

    # ------------------------------------------------------------------
    # Grid access
    # ------------------------------------------------------------------

    def squares(self) -> Iterator[Tuple[int, int, Piece]]:
        """Yield (row, col, piece) in storage order, row 0 first."""
        for row, rank in enumerate(self._ranks):
            for col, piece in enumerate(rank):
                yield row, col, piece

    def find_piece(self, position: PositionLike) -> Piece:
        """
        Return the piece on *position* (a Blank if the square is empty).

        Args:
            position: Algebraic notation like "b2" or a Position

        Raises:
            InvalidPositionError: If the notation is malformed
        """
        pos = Position.coerce(position)
        return self._rank(pos.row).get_piece(pos.col)

    def move(self, position: PositionLike, piece: Piece) -> None:
        """
        Place *piece* on *position*.

        Whatever occupied the destination is discarded (capture). If *piece*
        already stands elsewhere on this board, its old square becomes Blank.
        No legality checks are made.

        Args:
            position: Destination square
            piece: Piece to place

        Raises:
            InvalidPositionError: If the notation is malformed
            IndexOutOfRangeError: If the board is not initialized
        """
        target = Position.coerce(position)
        target_rank = self._rank(target.row)

        origin = piece.position
        if origin is not None and origin != target and self._occupies(origin, piece):
            self._rank(origin.row)[origin.col] = create_blank(origin)

        captured = target_rank[target.col]
        target_rank[target.col] = piece
        piece.position = target

        if captured.is_blank() or captured is piece:
            logger.debug(f"Moved {piece.symbol} to {target.notation}")
        else:
            logger.debug(f"Moved {piece.symbol} to {target.notation}, replacing {captured.symbol}")

    def _occupies(self, position: Position, piece: Piece) -> bool:
        return self.is_initialized and self._ranks[position.row][position.col] is piece

    # ------------------------------------------------------------------
    # Piece queries
    # ------------------------------------------------------------------

    def pieces(self, color: Color) -> List[Piece]:
        """Non-blank pieces of *color* in grid order."""
        return [
            piece
            for _, _, piece in self.squares()
            if piece.match_color(color) and not piece.is_blank()
        ]

    @property
    def white_pieces(self) -> List[Piece]:
        return self.pieces(Color.WHITE)

    @property
    def black_pieces(self) -> List[Piece]:
        return self.pieces(Color.BLACK)

    def piece_count(self) -> int:
        """Total number of non-blank pieces."""
        return len(self.white_pieces) + len(self.black_pieces)

    def get_piece_count(self, color: Color, kind: PieceSymbol) -> int:
        """Number of squares holding a *color* *kind*."""
        return sum(1 for _, _, piece in self.squares() if piece.equals_piece(color, kind))

    def occupied_positions(self) -> List[Position]:
        """Squares holding a non-blank piece, for is_obstacle_in_path()."""
        return [
            Position(row, col)
            for row, col, piece in self.squares()
            if not piece.is_blank()
        ]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def calculate_point(self, color: Color) -> float:
        """
        Material points for *color*, with doubled pawns discounted.

        Args:
            color: Side to score

        Returns:
            float: Sum of default point values (pawns in a column with
            another same-color pawn count for half by default)
        """
        return self.evaluator.score(self, color)

    def has_same_vertical_pawns(self, color: Color) -> bool:
        """True if two or more *color* pawns share any column."""
        return bool((self.pawn_column_counts(color) >= 2).any())

    def pawn_column_counts(self, color: Color) -> np.ndarray:
        """
        Number of *color* pawns on each file, read from the pawn plane.

        Returns:
            int array of length 8, index 0 = a-file
        """
        from chess_board.board.representation import PIECE_TO_CHANNEL

        channel = PIECE_TO_CHANNEL.get((PieceSymbol.PAWN, color))
        if channel is None:
            return np.zeros(BOARD_SIZE, dtype=int)
        return self.to_tensor()[channel].sum(axis=0).astype(int)

    def sort_pieces_reversed(self, color: Color) -> List[str]:
        """Symbols of *color*'s pieces, ascending by point value (stable)."""
        ordered = sorted(self.pieces(color), key=lambda piece: piece.default_point)
        return [piece.symbol for piece in ordered]

    def sort_pieces(self, color: Color) -> List[str]:
        """Exact reverse of sort_pieces_reversed()."""
        return self.sort_pieces_reversed(color)[::-1]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_symbol(self, piece: Piece) -> str:
        if piece.is_blank():
            return self.config.blank_symbol
        return piece.symbol

    def show_board(self) -> str:
        """
        Text grid, one line per stored rank, each newline-terminated.

        Example (starting position)::

            rnbqkbnr
            pppppppp
            ........
            ........
            ........
            ........
            PPPPPPPP
            RNBQKBNR
        """
        return "".join(
            "".join(self._render_symbol(piece) for piece in rank) + "\n"
            for rank in self._ranks
        )

    def __str__(self) -> str:
        return self.show_board()

    def __repr__(self) -> str:
        if not self.is_initialized:
            return "Board(uninitialized)"
        return f"Board(white={len(self.white_pieces)}, black={len(self.black_pieces)})"

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_python_chess(self) -> chess.Board:
        """Piece placement as a python-chess Board (White to move, no rights)."""
        from chess_board.board.representation import board_to_python_chess

        return board_to_python_chess(self)

    def board_fen(self) -> str:
        """FEN piece-placement field."""
        return self.to_python_chess().board_fen()

    def to_tensor(self) -> np.ndarray:
        """(12, 8, 8) float32 piece planes."""
        from chess_board.board.representation import board_to_tensor

        return board_to_tensor(self)

    @classmethod
    def from_python_chess(
        cls, chess_board: chess.Board, config: Optional[BoardConfig] = None
    ) -> "Board":
        from chess_board.board.representation import python_chess_to_board

        return python_chess_to_board(chess_board, config)

    @classmethod
    def from_fen(cls, fen: str, config: Optional[BoardConfig] = None) -> "Board":
        """
        Build a board from a FEN string or just its placement field.

        Raises:
            ValueError: If python-chess rejects the FEN
        """
        from chess_board.board.representation import fen_to_board

        return fen_to_board(fen, config)
