"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, format_board, SIZE, BOX_SIZE, EMPTY
from .validator import is_valid, is_valid_board, validate_solution

__all__ = [
    "SudokuBoard",
    "format_board",
    "SIZE",
    "BOX_SIZE",
    "EMPTY",
    "is_valid",
    "is_valid_board",
    "validate_solution",
]
