"""
Board Exceptions

All errors raised by the board model are caller-input problems. They are
raised before any state is mutated and are never recovered internally.

Hierarchy:
    ChessBoardError
    ├── InvalidPositionError (also a ValueError)
    └── IndexOutOfRangeError (also an IndexError)
"""


class ChessBoardError(Exception):
    """Base class for all board model errors."""
    pass


class InvalidPositionError(ChessBoardError, ValueError):
    """Malformed algebraic notation or coordinates outside [0, 7]."""
    pass


class IndexOutOfRangeError(ChessBoardError, IndexError):
    """Row or column index outside [0, 7] on direct grid access."""
    pass
