"""
Board Conversions

This module converts a Board to and from the python-chess ecosystem and into
piece planes. Board.pawn_column_counts() reads the pawn planes to find doubled
files for scoring.

12-Channel Representation (piece positions only):
    0: White Pawns      6: Black Pawns
    1: White Knights    7: Black Knights
    2: White Bishops    8: Black Bishops
    3: White Rooks      9: Black Rooks
    4: White Queens    10: Black Queens
    5: White Kings     11: Black Kings

Each channel is an 8*8 binary mask where 1 indicates piece presence.

Board Orientation (shared with Position and the stored rank order):
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file

Only piece placement is converted. Side to move, castling rights and en
passant are outside the board model and are dropped on import.
"""

import logging
from typing import Optional, Tuple

import chess
import numpy as np

from chess_board.board.board import Board
from chess_board.board.position import Position
from chess_board.config import BoardConfig
from chess_board.pieces.base import Color, Piece, PieceSymbol
from chess_board.pieces.factory import create_piece

logger = logging.getLogger(__name__)

KIND_TO_PIECE_TYPE = {
    PieceSymbol.PAWN: chess.PAWN,
    PieceSymbol.KNIGHT: chess.KNIGHT,
    PieceSymbol.BISHOP: chess.BISHOP,
    PieceSymbol.ROOK: chess.ROOK,
    PieceSymbol.QUEEN: chess.QUEEN,
    PieceSymbol.KING: chess.KING,
}
PIECE_TYPE_TO_KIND = {v: k for k, v in KIND_TO_PIECE_TYPE.items()}

COLOR_TO_CHESS = {
    Color.WHITE: chess.WHITE,
    Color.BLACK: chess.BLACK,
}
CHESS_TO_COLOR = {v: k for k, v in COLOR_TO_CHESS.items()}

# Piece kind to channel index mapping
# White pieces: channels 0-5
# Black pieces: channels 6-11
PIECE_TO_CHANNEL = {
    (PieceSymbol.PAWN, Color.WHITE): 0,
    (PieceSymbol.KNIGHT, Color.WHITE): 1,
    (PieceSymbol.BISHOP, Color.WHITE): 2,
    (PieceSymbol.ROOK, Color.WHITE): 3,
    (PieceSymbol.QUEEN, Color.WHITE): 4,
    (PieceSymbol.KING, Color.WHITE): 5,
    (PieceSymbol.PAWN, Color.BLACK): 6,
    (PieceSymbol.KNIGHT, Color.BLACK): 7,
    (PieceSymbol.BISHOP, Color.BLACK): 8,
    (PieceSymbol.ROOK, Color.BLACK): 9,
    (PieceSymbol.QUEEN, Color.BLACK): 10,
    (PieceSymbol.KING, Color.BLACK): 11,
}


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert python-chess square index to (row, column) coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    position = Position.from_square(square)
    return position.row, position.col


def coordinates_to_square(row: int, col: int) -> int:
    """
    Convert (row, column) coordinates to python-chess square index.

    Raises:
        InvalidPositionError: If row or col is outside [0, 7]
    """
    return Position(row, col).square


def piece_to_python_chess(piece: Piece) -> Optional[chess.Piece]:
    """python-chess equivalent of *piece*, or None for a Blank."""
    if piece.is_blank():
        return None
    return chess.Piece(KIND_TO_PIECE_TYPE[piece.kind], COLOR_TO_CHESS[piece.color])


def python_chess_to_piece(piece: chess.Piece) -> Piece:
    return create_piece(CHESS_TO_COLOR[piece.color], PIECE_TYPE_TO_KIND[piece.piece_type])


def board_to_python_chess(board: Board) -> chess.Board:
    """
    Copy piece placement into a python-chess Board.

    The result has White to move and no castling or en passant rights.

    Args:
        board: Initialized Board

    Returns:
        python-chess Board object
    """
    result = chess.Board(fen=None)

    for row, col, piece in board.squares():
        chess_piece = piece_to_python_chess(piece)
        if chess_piece is not None:
            result.set_piece_at(coordinates_to_square(row, col), chess_piece)

    return result


def python_chess_to_board(
    chess_board: chess.Board, config: Optional[BoardConfig] = None
) -> Board:
    """
    Build a Board from a python-chess Board's piece placement.

    This is the inverse of board_to_python_chess().

    Args:
        chess_board: python-chess Board object
        config: Optional configuration for the new board

    Returns:
        Board with fresh pieces placed on matching squares
    """
    board = Board(config=config)
    board.initialize_empty()

    for square, chess_piece in chess_board.piece_map().items():
        board.move(Position.from_square(square), python_chess_to_piece(chess_piece))

    logger.debug(f"Imported {board.piece_count()} pieces from python-chess board")
    return board


def fen_to_board(fen: str, config: Optional[BoardConfig] = None) -> Board:
    """
    Build a Board from a full FEN or only its piece-placement field.

    Raises:
        ValueError: If python-chess rejects the FEN
    """
    fields = fen.split()
    if not fields:
        raise ValueError(f"Empty FEN: {fen!r}")

    chess_board = chess.Board(fen=None)
    chess_board.set_board_fen(fields[0])
    return python_chess_to_board(chess_board, config)


def board_to_tensor(board: Board) -> np.ndarray:
    """
    Convert a board to a 12-channel tensor representation.

    Args:
        board: Initialized Board

    Returns:
        numpy array of shape (12, 8, 8) with dtype float32
        - 12 channels: 6 piece types * 2 colors
        - Binary values: 1.0 piece exists, 0.0 no piece
    """
    tensor = np.zeros((12, 8, 8), dtype=np.float32)

    for row, col, piece in board.squares():
        if piece.is_blank():
            continue
        channel = PIECE_TO_CHANNEL[(piece.kind, piece.color)]
        tensor[channel, row, col] = 1.0

    return tensor


def tensor_to_board(tensor: np.ndarray, config: Optional[BoardConfig] = None) -> Board:
    """
    Convert a 12-channel tensor back to a Board.

    This is the inverse of board_to_tensor().

    Args:
        tensor: numpy array of shape (12, 8, 8)
        config: Optional configuration for the new board

    Returns:
        Board with pieces on every square marked in the tensor

    Raises:
        ValueError: If tensor has invalid shape or multiple pieces on one square
    """
    if tensor.shape != (12, 8, 8):
        raise ValueError(f"Invalid tensor shape: {tensor.shape}. Expected (12, 8, 8)")

    board = Board(config=config)
    board.initialize_empty()

    channel_to_piece = {v: k for k, v in PIECE_TO_CHANNEL.items()}

    for channel in range(12):
        kind, color = channel_to_piece[channel]

        for row, col in np.argwhere(tensor[channel] > 0.5):
            position = Position(int(row), int(col))

            if not board.find_piece(position).is_blank():
                raise ValueError(f"Multiple pieces on square {position.notation}")

            board.move(position, create_piece(color, kind))

    return board
