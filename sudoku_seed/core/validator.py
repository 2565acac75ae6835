"""Validation utilities for Sudoku boards."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid(board: SudokuBoard, row: int, col: int, digit: int) -> bool:
    """
    Check if placing a digit at (row, col) keeps the board legal.

    This is the only placement rule used by both the generator and the
    solver. Whatever the target cell currently holds is ignored; only the
    other cells of its row, column and 3x3 box are examined.

    Args:
        board: The Sudoku board.
        row: Row index (0-8).
        col: Column index (0-8).
        digit: Digit to check (1-9).

    Returns:
        True if digit occurs in none of the cell's peers.
    """
    box_size = board.box_size

    # Check row
    if digit in np.delete(board.get_row(row), col):
        return False

    # Check column
    if digit in np.delete(board.get_col(col), row):
        return False

    # Check box
    box_pos = (row % box_size) * box_size + (col % box_size)
    if digit in np.delete(board.get_box(row, col), box_pos):
        return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def validate_solution(seed: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly completes a seed board.

    Args:
        seed: The board the solver started from.
        solution: The proposed solution.

    Returns:
        True if solution is complete, legal and keeps every seed digit.
    """
    clues = seed.grid != 0
    if not np.array_equal(seed.grid[clues], solution.grid[clues]):
        return False

    return solution.is_solved()
