"""Sparse Sudoku seed-board generator and backtracking solver."""

from .core import SudokuBoard, format_board, is_valid
from .generator import SeedGenerator, generate_board
from .solvers import BacktrackingSolver, solve

__all__ = [
    "SudokuBoard",
    "format_board",
    "is_valid",
    "SeedGenerator",
    "generate_board",
    "BacktrackingSolver",
    "solve",
]
