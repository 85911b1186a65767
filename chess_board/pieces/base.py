"""
Abstract Piece Interface

Every piece kind implements the same small capability interface:

    get_directions()        -> the kind's fixed Direction catalog
    verify_move_position()  -> is the target geometrically reachable?
    is_obstacle_in_path()   -> does anything sit between here and the target?

Pieces only answer geometric questions. Whether a move is legal in a game
(turn order, own-piece captures, check) is decided by the caller from these
answers plus the board contents.

Convention:
    - White symbols are uppercase, Black symbols lowercase
    - Point values are in pawns (pawn = 1.0, queen = 9.0)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Optional, Union

from chess_board.board.position import Direction, Position


class Color(Enum):
    WHITE = "white"
    BLACK = "black"
    NONE = "none"  # blank squares


class PieceSymbol(Enum):
    """Piece kind with its display letter and default point value."""

    PAWN = ("p", 1.0)
    KNIGHT = ("n", 2.5)
    BISHOP = ("b", 3.0)
    ROOK = ("r", 5.0)
    QUEEN = ("q", 9.0)
    KING = ("k", 0.0)
    BLANK = (".", 0.0)

    def __init__(self, letter: str, default_point: float):
        self.letter = letter
        self.default_point = default_point


PositionLike = Union[Position, str]


class Piece(ABC):
    """
    Abstract base class for all pieces.

    A piece is a value-like record of (color, kind) plus a mutable position
    that the board updates on every move. Two pieces compare equal when
    color and kind match; the board tracks identity with ``is``.

    Attributes:
        color: Owning side (Color.NONE for blanks)
        kind: PieceSymbol discriminant, fixed per subclass
        position: Current square, or None if not yet placed
    """

    kind: PieceSymbol

    def __init__(self, color: Color, position: Optional[PositionLike] = None):
        self.color = color
        self.position = position

    @property
    def position(self) -> Optional[Position]:
        return self._position

    @position.setter
    def position(self, value: Optional[PositionLike]) -> None:
        self._position = None if value is None else Position.coerce(value)

    # ------------------------------------------------------------------
    # Movement capability
    # ------------------------------------------------------------------

    @abstractmethod
    def get_directions(self) -> List[Direction]:
        """Ordered Direction catalog for this kind."""
        pass

    @abstractmethod
    def verify_move_position(self, target: PositionLike) -> bool:
        """
        Check whether *target* is reachable from the current position.

        Only geometry is considered. Moving to the current square is never
        valid.

        Args:
            target: Destination square

        Returns:
            bool: True if the kind's move pattern reaches *target*

        Raises:
            ValueError: If the piece has not been placed
            InvalidPositionError: If *target* is malformed notation
        """
        pass

    def is_obstacle_in_path(
        self, target: PositionLike, obstacles: Iterable[PositionLike]
    ) -> bool:
        """
        Check whether any square strictly between here and *target* is occupied.

        Both endpoints are excluded. Targets that are not on a shared rank,
        file or diagonal have no intermediate squares.

        Args:
            target: Destination square
            obstacles: Occupied squares

        Returns:
            bool: True if the path is blocked
        """
        blocked = {Position.coerce(p) for p in obstacles}
        return any(square in blocked for square in self.path_to(target))

    def path_to(self, target: PositionLike) -> List[Position]:
        """Squares strictly between the current position and *target*."""
        origin = self._require_position()
        target = Position.coerce(target)

        d_row = target.row - origin.row
        d_col = target.col - origin.col
        aligned = d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)
        if (d_row, d_col) == (0, 0) or not aligned:
            return []

        step_row = (d_row > 0) - (d_row < 0)
        step_col = (d_col > 0) - (d_col < 0)
        distance = max(abs(d_row), abs(d_col))
        return [
            Position(origin.row + step_row * i, origin.col + step_col * i)
            for i in range(1, distance)
        ]

    def reachable_positions(self) -> List[Position]:
        """Single-step destinations from the catalog that stay on the board."""
        origin = self._require_position()
        return [
            origin.add_pos(direction)
            for direction in self.get_directions()
            if origin.is_valid_direction(direction)
        ]

    def _require_position(self) -> Position:
        if self.position is None:
            raise ValueError(f"{self!r} has not been placed on the board")
        return self.position

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def symbol(self) -> str:
        """Display character: uppercase for White, lowercase for Black."""
        if self.color == Color.WHITE:
            return self.kind.letter.upper()
        return self.kind.letter

    @property
    def default_point(self) -> float:
        return self.kind.default_point

    def is_white(self) -> bool:
        return self.color == Color.WHITE

    def is_black(self) -> bool:
        return self.color == Color.BLACK

    def is_blank(self) -> bool:
        return self.kind == PieceSymbol.BLANK

    def match_color(self, color: Color) -> bool:
        return self.color == color

    def equals_piece(self, color: Color, kind: PieceSymbol) -> bool:
        return self.color == color and self.kind == kind

    def equals_pawn(self, color: Color) -> bool:
        return self.equals_piece(color, PieceSymbol.PAWN)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.color == other.color and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.color, self.kind))

    def __repr__(self) -> str:
        where = self.position.notation if self.position is not None else "unplaced"
        return f"{self.__class__.__name__}({self.color.name}, {where})"
