"""One row of the board: exactly 8 pieces indexed by column."""

from typing import Iterator, List

from chess_board.board.position import BOARD_SIZE
from chess_board.exceptions import IndexOutOfRangeError
from chess_board.pieces.base import Piece


def check_index(index: int, name: str = "col") -> int:
    """Reject indexes outside [0, 7], including negative ones."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
        raise IndexOutOfRangeError(f"{name} out of range [0, {BOARD_SIZE - 1}]: {index!r}")
    return index


class Rank:
    """
    Ordered row of 8 pieces.

    Empty squares hold a Blank piece; a rank never contains None.

    Raises:
        IndexOutOfRangeError: If constructed with a piece count other than 8
    """

    def __init__(self, pieces: List[Piece]):
        if len(pieces) != BOARD_SIZE:
            raise IndexOutOfRangeError(
                f"A rank holds exactly {BOARD_SIZE} pieces, got {len(pieces)}"
            )
        self._pieces = list(pieces)

    @property
    def pieces(self) -> List[Piece]:
        return list(self._pieces)

    def get_piece(self, col: int) -> Piece:
        return self._pieces[check_index(col)]

    def __getitem__(self, col: int) -> Piece:
        return self.get_piece(col)

    def __setitem__(self, col: int, piece: Piece) -> None:
        self._pieces[check_index(col)] = piece

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        return f"Rank({''.join(piece.symbol for piece in self._pieces)!r})"
