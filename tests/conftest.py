"""Shared fixtures for the test suite."""

import pytest
from sudoku_seed.core.board import SudokuBoard


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzle():
    return SudokuBoard.from_string(TEST_PUZZLE)


@pytest.fixture
def solution():
    return SudokuBoard.from_string(TEST_SOLUTION)


@pytest.fixture
def unsolvable():
    """
    A board whose top-left cells can be filled but whose last cell cannot.

    Built from the known solution: (0,0)-(0,2) are cleared, each with exactly
    one candidate, and the 7 at (8,7) is replaced by a second 9 so that
    (8,8) has no legal digit left.
    """
    board = SudokuBoard.from_string(TEST_SOLUTION)
    for col in range(3):
        board.clear(0, col)
    board.set(8, 7, 9)
    board.clear(8, 8)
    return board
