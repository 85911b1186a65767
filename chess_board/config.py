"""
Board configuration.
"""

from dataclasses import dataclass


@dataclass
class BoardConfig:
    """Rendering and scoring settings for a Board.

    Defaults reproduce the standard text grid and the half-point doubled
    pawn penalty.
    """

    # Rendering
    blank_symbol: str = "."
    """Filler character for empty squares in show_board()"""

    # Scoring
    doubled_pawn_divisor: float = 2.0
    """Each pawn in a column with 2+ same-color pawns is divided by this"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.blank_symbol, str) or len(self.blank_symbol) != 1:
            raise ValueError(
                f"blank_symbol must be a single character, got {self.blank_symbol!r}"
            )

        if self.blank_symbol.isalpha():
            raise ValueError(
                f"blank_symbol must not be a letter (clashes with piece symbols), "
                f"got {self.blank_symbol!r}"
            )

        if (
            isinstance(self.doubled_pawn_divisor, bool)
            or not isinstance(self.doubled_pawn_divisor, (int, float))
            or self.doubled_pawn_divisor <= 0
        ):
            raise ValueError(
                f"doubled_pawn_divisor must be positive, got {self.doubled_pawn_divisor!r}"
            )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"BoardConfig(blank_symbol={self.blank_symbol!r}, "
            f"doubled_pawn_divisor={self.doubled_pawn_divisor})"
        )
