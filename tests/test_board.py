"""
Unit Tests for Board

Tests for the board aggregate, focusing on:
    - Standard and empty initialization
    - find_piece() / move() round trips and capture semantics
    - Per-color piece lists staying in sync with the grid
    - Scoring with the doubled-pawn penalty
    - Sorting and text rendering
"""

from collections import Counter

import pytest

from chess_board.board import Board, Position
from chess_board.config import BoardConfig
from chess_board.evaluation import Evaluator
from chess_board.exceptions import IndexOutOfRangeError, InvalidPositionError
from chess_board.pieces import (
    BACK_RANK,
    Color,
    PieceSymbol,
    create_black_king,
    create_black_pawn,
    create_black_queen,
    create_black_rook,
    create_blank,
    create_white_king,
    create_white_knight,
    create_white_pawn,
    create_white_queen,
    create_white_rook,
)

STARTING_BOARD = (
    "rnbqkbnr\n"
    "pppppppp\n"
    "........\n"
    "........\n"
    "........\n"
    "........\n"
    "PPPPPPPP\n"
    "RNBQKBNR\n"
)


@pytest.fixture
def board():
    """Board in the standard starting position."""
    board = Board()
    board.initialize()
    return board


@pytest.fixture
def empty_board():
    """Board with 64 blank squares."""
    board = Board()
    board.initialize_empty()
    return board


class TestInitialization:
    """Tests for initialize() and initialize_empty()."""

    def test_piece_counts(self, board):
        assert board.piece_count() == 32
        assert len(board.white_pieces) == 16
        assert len(board.black_pieces) == 16

    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_counts_by_kind(self, board, color):
        assert board.get_piece_count(color, PieceSymbol.PAWN) == 8
        assert board.get_piece_count(color, PieceSymbol.KNIGHT) == 2
        assert board.get_piece_count(color, PieceSymbol.BISHOP) == 2
        assert board.get_piece_count(color, PieceSymbol.ROOK) == 2
        assert board.get_piece_count(color, PieceSymbol.QUEEN) == 1
        assert board.get_piece_count(color, PieceSymbol.KING) == 1

    def test_blank_count(self, board):
        assert board.get_piece_count(Color.NONE, PieceSymbol.BLANK) == 32

    def test_back_ranks(self, board):
        """Both back ranks read R N B Q K B N R in file order."""
        ranks = board.ranks
        assert [piece.kind for piece in ranks[0]] == BACK_RANK
        assert [piece.kind for piece in ranks[7]] == BACK_RANK
        assert all(piece.is_black() for piece in ranks[0])
        assert all(piece.is_white() for piece in ranks[7])

    def test_rank_order(self, board):
        """Black back rank first, White back rank last."""
        ranks = board.ranks
        assert all(piece.equals_pawn(Color.BLACK) for piece in ranks[1])
        assert all(piece.is_blank() for rank in ranks[2:6] for piece in rank)
        assert all(piece.equals_pawn(Color.WHITE) for piece in ranks[6])

    def test_positions_match_grid(self, board):
        for row, col, piece in board.squares():
            assert piece.position == Position(row, col)

    def test_find_piece(self, board):
        assert board.find_piece("a8").equals_piece(Color.BLACK, PieceSymbol.ROOK)
        assert board.find_piece("e1").equals_piece(Color.WHITE, PieceSymbol.KING)
        assert board.find_piece("d8").equals_piece(Color.BLACK, PieceSymbol.QUEEN)
        assert board.find_piece("e4").is_blank()
        assert board.find_piece(Position(6, 0)).equals_pawn(Color.WHITE)

    def test_initialize_empty(self, empty_board):
        assert empty_board.piece_count() == 0
        assert all(piece.kind == PieceSymbol.BLANK for _, _, piece in empty_board.squares())
        assert len(list(empty_board.squares())) == 64

    def test_initialize_empty_clears_previous_state(self, board):
        board.initialize_empty()
        assert board.piece_count() == 0
        assert board.white_pieces == []
        assert board.black_pieces == []

    def test_uninitialized_board(self):
        board = Board()
        assert not board.is_initialized
        assert board.piece_count() == 0
        assert board.show_board() == ""
        with pytest.raises(IndexOutOfRangeError):
            board.find_piece("a1")
        with pytest.raises(IndexOutOfRangeError):
            board.move("a1", create_white_rook())

    def test_fresh_pieces_each_initialize(self, board):
        """Pieces are never reused between initializations."""
        before = board.find_piece("a1")
        board.initialize()
        assert board.find_piece("a1") is not before


class TestMove:
    """Tests for move() semantics."""

    def test_round_trip(self, empty_board):
        king = create_black_king()
        empty_board.move("b5", king)

        assert empty_board.find_piece("b5") is king
        assert king.position == Position.from_notation("b5")
        assert empty_board.piece_count() == 1
        assert empty_board.black_pieces == [king]

    def test_move_vacates_origin(self, board):
        """Moving a piece already on the board leaves a blank behind."""
        knight = board.find_piece("b1")
        board.move("c3", knight)

        assert board.find_piece("c3") is knight
        assert board.find_piece("b1").is_blank()
        assert board.find_piece("b1").position == Position.from_notation("b1")
        assert board.piece_count() == 32
        assert len(board.white_pieces) == 16

    def test_no_duplicates_after_moves(self, board):
        knight = board.find_piece("g1")
        board.move("f3", knight)
        board.move("e5", knight)
        board.move("f7", knight)

        white_ids = [id(piece) for piece in board.white_pieces]
        assert len(white_ids) == len(set(white_ids)) == 16

    def test_capture_discards_destination(self, board):
        queen = board.find_piece("d1")
        captured = board.find_piece("d7")
        board.move("d7", queen)

        assert board.find_piece("d7") is queen
        assert board.piece_count() == 31
        assert len(board.black_pieces) == 15
        assert all(piece is not captured for piece in board.black_pieces)
        assert board.get_piece_count(Color.BLACK, PieceSymbol.PAWN) == 7

    def test_move_to_same_square(self, board):
        rook = board.find_piece("a1")
        board.move("a1", rook)
        assert board.find_piece("a1") is rook
        assert board.piece_count() == 32

    def test_placing_new_piece_overwrites(self, board):
        """Placing a fresh piece replaces the occupant without vacating anything."""
        queen = create_black_queen()
        board.move("e2", queen)
        assert board.find_piece("e2") is queen
        assert board.get_piece_count(Color.WHITE, PieceSymbol.PAWN) == 7
        assert board.piece_count() == 32

    def test_moving_blank_clears_square(self, board):
        board.move("d8", create_blank())
        assert board.get_piece_count(Color.BLACK, PieceSymbol.QUEEN) == 0
        assert board.piece_count() == 31

    def test_invalid_position_leaves_board_unchanged(self, board):
        knight = board.find_piece("b1")
        with pytest.raises(InvalidPositionError):
            board.move("z9", knight)

        assert board.show_board() == STARTING_BOARD
        assert knight.position == Position.from_notation("b1")

    def test_find_piece_invalid_notation(self, board):
        with pytest.raises(InvalidPositionError):
            board.find_piece("a0")

    def test_no_legality_check(self, board):
        """move() places pieces wherever asked; legality is the caller's job."""
        rook = board.find_piece("a1")
        board.move("h5", rook)
        assert board.find_piece("h5") is rook

    def test_caller_legality_from_queries(self, board):
        """Geometry plus obstacles answer whether a move is possible."""
        rook = board.find_piece("a1")
        assert rook.verify_move_position("a8")
        assert rook.is_obstacle_in_path("a8", board.occupied_positions())

        knight = board.find_piece("b1")
        assert knight.verify_move_position("c3")
        assert not knight.is_obstacle_in_path("c3", board.occupied_positions())

    def test_occupied_positions(self, board, empty_board):
        assert len(board.occupied_positions()) == 32
        assert empty_board.occupied_positions() == []


class TestScoring:
    """Tests for calculate_point() and has_same_vertical_pawns()."""

    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_starting_points(self, board, color):
        """8x1 + 2x2.5 + 2x3 + 2x5 + 9 = 38"""
        assert board.calculate_point(color) == 38.0

    def test_no_doubled_pawns_at_start(self, board):
        assert not board.has_same_vertical_pawns(Color.WHITE)
        assert not board.has_same_vertical_pawns(Color.BLACK)

    def test_doubled_pawns_halved(self, board):
        """a2 -> b3 doubles the b-file: pawns total 6 + 0.5 + 0.5 = 7."""
        board.move("b3", board.find_piece("a2"))

        assert board.has_same_vertical_pawns(Color.WHITE)
        assert not board.has_same_vertical_pawns(Color.BLACK)
        assert board.calculate_point(Color.WHITE) == 37.0
        assert board.calculate_point(Color.BLACK) == 38.0

    def test_mixed_position(self, empty_board):
        """Hand-built position with one doubled file."""
        empty_board.move("b8", create_black_king())
        empty_board.move("c8", create_black_rook())
        empty_board.move("a7", create_black_pawn())
        empty_board.move("c7", create_black_pawn())
        empty_board.move("d7", create_black_pawn())
        empty_board.move("b6", create_black_pawn())
        empty_board.move("e6", create_black_queen())

        empty_board.move("f4", create_white_knight())
        empty_board.move("g4", create_white_queen())
        empty_board.move("f2", create_white_pawn())
        empty_board.move("f3", create_white_pawn())
        empty_board.move("g2", create_white_pawn())
        empty_board.move("h3", create_white_pawn())
        empty_board.move("e1", create_white_rook())
        empty_board.move("f1", create_white_king())

        assert empty_board.calculate_point(Color.BLACK) == 18.0
        assert empty_board.calculate_point(Color.WHITE) == 19.5

    def test_three_pawns_on_one_file(self, empty_board):
        """Every pawn on a file with 2+ same-color pawns is halved."""
        for square in ("c2", "c3", "c4", "e2"):
            empty_board.move(square, create_white_pawn())

        assert empty_board.calculate_point(Color.WHITE) == 2.5

    def test_opposite_colors_do_not_double(self, empty_board):
        empty_board.move("c2", create_white_pawn())
        empty_board.move("c7", create_black_pawn())

        assert not empty_board.has_same_vertical_pawns(Color.WHITE)
        assert empty_board.calculate_point(Color.WHITE) == 1.0

    def test_custom_divisor(self):
        board = Board(config=BoardConfig(doubled_pawn_divisor=4.0))
        board.initialize_empty()
        board.move("c2", create_white_pawn())
        board.move("c3", create_white_pawn())
        assert board.calculate_point(Color.WHITE) == 0.5

    def test_custom_evaluator(self):
        """calculate_point() delegates to the injected evaluator."""

        class FixedEvaluator(Evaluator):
            def score(self, board, color):
                return 42.0

        custom = Board(evaluator=FixedEvaluator())
        custom.initialize()
        assert custom.calculate_point(Color.WHITE) == 42.0

    def test_empty_board_scores_zero(self, empty_board):
        assert empty_board.calculate_point(Color.WHITE) == 0.0

    def test_pawn_column_counts(self, board):
        """Counts per file come from the pawn plane."""
        assert board.pawn_column_counts(Color.WHITE).tolist() == [1] * 8

        board.move("b3", board.find_piece("a2"))
        assert board.pawn_column_counts(Color.WHITE).tolist() == [0, 2, 1, 1, 1, 1, 1, 1]
        assert board.pawn_column_counts(Color.BLACK).tolist() == [1] * 8

    def test_pawn_column_counts_blank_color(self, board):
        assert board.pawn_column_counts(Color.NONE).tolist() == [0] * 8

    def test_doubled_check_agrees_with_score(self, empty_board):
        """has_same_vertical_pawns() and the evaluator see the same files."""
        evaluator = empty_board.evaluator
        assert not empty_board.has_same_vertical_pawns(Color.BLACK)
        assert evaluator.doubled_pawn_columns(empty_board, Color.BLACK) == set()

        empty_board.move("e7", create_black_pawn())
        empty_board.move("e5", create_black_pawn())
        assert empty_board.has_same_vertical_pawns(Color.BLACK)
        assert evaluator.doubled_pawn_columns(empty_board, Color.BLACK) == {4}


class TestSorting:
    """Tests for sort_pieces() and sort_pieces_reversed()."""

    def test_sort_reversed_ascending(self, board):
        expected = ["K"] + ["P"] * 8 + ["N", "N", "B", "B", "R", "R", "Q"]
        assert board.sort_pieces_reversed(Color.WHITE) == expected

    def test_sort_descending(self, board):
        expected = ["q", "r", "r", "b", "b", "n", "n"] + ["p"] * 8 + ["k"]
        assert board.sort_pieces(Color.BLACK) == expected

    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_exact_reverses(self, board, color):
        ascending = board.sort_pieces_reversed(color)
        descending = board.sort_pieces(color)

        assert descending == ascending[::-1]
        assert Counter(ascending) == Counter(descending)
        assert len(ascending) == 16

    def test_sort_reflects_captures(self, board):
        board.move("d8", board.find_piece("d1"))
        assert "q" not in board.sort_pieces(Color.BLACK)
        assert board.sort_pieces(Color.WHITE)[0] == "Q"

    def test_empty(self, empty_board):
        assert empty_board.sort_pieces(Color.WHITE) == []
        assert empty_board.sort_pieces_reversed(Color.BLACK) == []


class TestShowBoard:
    """Tests for the text rendering."""

    def test_starting_position(self, board):
        assert board.show_board() == STARTING_BOARD

    def test_shape(self, board):
        output = board.show_board()
        lines = output.split("\n")

        assert output.endswith("\n")
        assert len(lines) == 9 and lines[-1] == ""
        assert all(len(line) == 8 for line in lines[:8])

    def test_empty(self, empty_board):
        assert empty_board.show_board() == "........\n" * 8

    def test_after_move(self, empty_board):
        empty_board.move("a1", create_white_king())
        empty_board.move("h8", create_black_king())

        lines = empty_board.show_board().splitlines()
        assert lines[0] == ".......k"
        assert lines[7] == "K......."

    def test_custom_blank_symbol(self):
        board = Board(config=BoardConfig(blank_symbol="*"))
        board.initialize_empty()
        assert board.show_board() == "********\n" * 8

    def test_str(self, board):
        assert str(board) == STARTING_BOARD
