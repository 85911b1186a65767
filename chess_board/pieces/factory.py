"""
Piece Factories

create_piece() dispatches on the kind discriminant; the named factories are
thin wrappers for each (color, kind) combination.
"""

from typing import Dict, Optional, Type

from chess_board.pieces.base import Color, Piece, PieceSymbol, PositionLike
from chess_board.pieces.blank import Blank
from chess_board.pieces.pawn import Pawn
from chess_board.pieces.sliding import Bishop, Queen, Rook
from chess_board.pieces.stepping import King, Knight

PIECE_CLASSES: Dict[PieceSymbol, Type[Piece]] = {
    PieceSymbol.PAWN: Pawn,
    PieceSymbol.KNIGHT: Knight,
    PieceSymbol.BISHOP: Bishop,
    PieceSymbol.ROOK: Rook,
    PieceSymbol.QUEEN: Queen,
    PieceSymbol.KING: King,
}

# Back rank in file order a-h
BACK_RANK = [
    PieceSymbol.ROOK,
    PieceSymbol.KNIGHT,
    PieceSymbol.BISHOP,
    PieceSymbol.QUEEN,
    PieceSymbol.KING,
    PieceSymbol.BISHOP,
    PieceSymbol.KNIGHT,
    PieceSymbol.ROOK,
]


def create_piece(
    color: Color, kind: PieceSymbol, position: Optional[PositionLike] = None
) -> Piece:
    """
    Create a piece of the given color and kind.

    Args:
        color: WHITE or BLACK (NONE only with kind BLANK)
        kind: Piece kind
        position: Optional starting square

    Returns:
        New piece instance

    Raises:
        ValueError: If color and kind don't form a valid piece
    """
    if kind == PieceSymbol.BLANK:
        if color != Color.NONE:
            raise ValueError(f"Blank pieces have no color, got {color}")
        return Blank(position)

    if color == Color.NONE:
        raise ValueError(f"{kind.name} requires WHITE or BLACK")

    return PIECE_CLASSES[kind](color, position)


def create_blank(position: Optional[PositionLike] = None) -> Piece:
    return Blank(position)


def create_white_pawn(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.PAWN, position)


def create_white_knight(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.KNIGHT, position)


def create_white_bishop(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.BISHOP, position)


def create_white_rook(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.ROOK, position)


def create_white_queen(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.QUEEN, position)


def create_white_king(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.WHITE, PieceSymbol.KING, position)


def create_black_pawn(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.PAWN, position)


def create_black_knight(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.KNIGHT, position)


def create_black_bishop(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.BISHOP, position)


def create_black_rook(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.ROOK, position)


def create_black_queen(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.QUEEN, position)


def create_black_king(position: Optional[PositionLike] = None) -> Piece:
    return create_piece(Color.BLACK, PieceSymbol.KING, position)
