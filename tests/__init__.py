"""Pytest suites for the chess_board package, one module per component."""
