"""
Utilities Module

Key Components:
    - setup_logger: configure the package logger for a host application
"""

from chess_board.utils.logging import setup_logger

__all__ = ['setup_logger']
