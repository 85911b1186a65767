"""
Grid Coordinates and Direction Vectors

Positions are (row, col) pairs on the 8x8 grid. Algebraic notation is parsed
with python-chess so square names follow the same rules as the rest of the
chess ecosystem.

Board Orientation:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file

"North" is toward rank 8, i.e. decreasing row index. White pawns move north,
Black pawns move south.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

import chess

from chess_board.exceptions import InvalidPositionError

BOARD_SIZE = 8


class Direction(Enum):
    """Single-step (d_row, d_col) vectors used by the movement rules."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)
    NORTHEAST = (-1, 1)
    NORTHWEST = (-1, -1)
    SOUTHEAST = (1, 1)
    SOUTHWEST = (1, -1)

    # Knight jumps
    NNE = (-2, 1)
    NNW = (-2, -1)
    SSE = (2, 1)
    SSW = (2, -1)
    EEN = (-1, 2)
    EES = (1, 2)
    WWN = (-1, -2)
    WWS = (1, -2)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @classmethod
    def linear(cls) -> List["Direction"]:
        """Orthogonal directions (rook)."""
        return [cls.NORTH, cls.SOUTH, cls.EAST, cls.WEST]

    @classmethod
    def diagonal(cls) -> List["Direction"]:
        """Diagonal directions (bishop)."""
        return [cls.NORTHEAST, cls.NORTHWEST, cls.SOUTHEAST, cls.SOUTHWEST]

    @classmethod
    def every(cls) -> List["Direction"]:
        """All 8 compass directions (king, queen)."""
        return [
            cls.NORTH, cls.SOUTH, cls.EAST, cls.WEST,
            cls.NORTHEAST, cls.NORTHWEST, cls.SOUTHEAST, cls.SOUTHWEST,
        ]

    @classmethod
    def knight(cls) -> List["Direction"]:
        """The complete knight move set."""
        return [
            cls.NNE, cls.NNW, cls.SSE, cls.SSW,
            cls.EEN, cls.EES, cls.WWN, cls.WWS,
        ]

    @classmethod
    def white_pawn(cls) -> List["Direction"]:
        """Forward step first, then the two capture diagonals."""
        return [cls.NORTH, cls.NORTHEAST, cls.NORTHWEST]

    @classmethod
    def black_pawn(cls) -> List["Direction"]:
        """Forward step first, then the two capture diagonals."""
        return [cls.SOUTH, cls.SOUTHEAST, cls.SOUTHWEST]


def _in_range(value: int) -> bool:
    return 0 <= value < BOARD_SIZE


@dataclass(frozen=True)
class Position:
    """
    Immutable grid coordinate.

    Attributes:
        row: 0-7, where 0 is rank 8
        col: 0-7, where 0 is the A-file

    Raises:
        InvalidPositionError: If either coordinate is not an int in [0, 7]
    """

    row: int
    col: int

    def __post_init__(self):
        for name, value in (("row", self.row), ("col", self.col)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPositionError(f"{name} must be an int, got {value!r}")
            if not _in_range(value):
                raise InvalidPositionError(
                    f"{name} out of range [0, {BOARD_SIZE - 1}]: {value}"
                )

    @classmethod
    def from_notation(cls, notation: str) -> "Position":
        """
        Parse algebraic notation such as "b2".

        Args:
            notation: Two-character square name, file a-h then rank 1-8

        Returns:
            Position for that square

        Raises:
            InvalidPositionError: If the notation is malformed
        """
        try:
            square = chess.parse_square(notation)
        except (ValueError, TypeError):
            raise InvalidPositionError(f"Invalid square notation: {notation!r}") from None
        return cls.from_square(square)

    @classmethod
    def from_square(cls, square: int) -> "Position":
        """Build from a python-chess square index (0=A1, 63=H8)."""
        return cls(7 - chess.square_rank(square), chess.square_file(square))

    @classmethod
    def coerce(cls, value: Union["Position", str]) -> "Position":
        """Accept either a Position or a notation string."""
        if isinstance(value, Position):
            return value
        return cls.from_notation(value)

    @property
    def square(self) -> int:
        """python-chess square index."""
        return chess.square(self.col, 7 - self.row)

    @property
    def notation(self) -> str:
        return chess.square_name(self.square)

    def offset(self, direction: Direction, steps: int = 1) -> Tuple[int, int]:
        """Raw (row, col) after stepping; may fall off the board."""
        return (
            self.row + direction.d_row * steps,
            self.col + direction.d_col * steps,
        )

    def is_valid_direction(self, direction: Direction, steps: int = 1) -> bool:
        """True if stepping in *direction* stays on the board."""
        row, col = self.offset(direction, steps)
        return _in_range(row) and _in_range(col)

    def add_pos(self, direction: Direction, steps: int = 1) -> "Position":
        """
        Position offset by *direction*.

        Callers should check is_valid_direction() first; an off-board result
        raises InvalidPositionError.
        """
        row, col = self.offset(direction, steps)
        return Position(row, col)

    def __str__(self) -> str:
        return self.notation
