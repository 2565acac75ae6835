"""Sparse random seed-board generator."""

from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_valid

log = logging.getLogger(__name__)

FILL_PROBABILITY = 0.6


class SeedGenerator:
    """
    Generator for sparse, rule-consistent Sudoku seed boards.

    Algorithm:
    1. Start from an empty board
    2. Visit every cell in row-major order and, with probability
       ``fill_probability``, draw one digit from 1-9
    3. Keep the digit only if it is a legal placement; otherwise the cell
       stays empty (there is no second draw)

    The result is not guaranteed to be solvable or to have a unique solution.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        fill_probability: float = FILL_PROBABILITY
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source exposing ``random()`` and ``integers(low, high)``.
            fill_probability: Chance that a cell gets a fill attempt.
        """
        if not 0.0 <= fill_probability <= 1.0:
            raise ValueError(f"fill_probability must be in [0, 1], got {fill_probability}")

        self.fill_probability = fill_probability
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> SudokuBoard:
        """
        Generate one seed board.

        Returns:
            A SudokuBoard, possibly with no digits at all.
        """
        board = SudokuBoard()
        attempts = 0

        for row in range(SIZE):
            for col in range(SIZE):
                if self.rng.random() <= self.fill_probability:
                    attempts += 1
                    digit = int(self.rng.integers(1, SIZE + 1))
                    if is_valid(board, row, col, digit):
                        board.set(row, col, digit)

        log.debug(
            "Generated seed board: %d fill attempts, %d placed",
            attempts, board.count_filled()
        )
        return board

    def generate_batch(self, count: int) -> List[SudokuBoard]:
        """
        Generate multiple seed boards from the same random source.

        Args:
            count: Number of boards to generate.

        Returns:
            List of SudokuBoard seeds.
        """
        return [self.generate() for _ in range(count)]


def generate_board(
    rng: Optional[np.random.Generator] = None,
    fill_probability: float = FILL_PROBABILITY
) -> SudokuBoard:
    """Generate a single seed board using ``rng`` (a fresh one if None)."""
    return SeedGenerator(rng=rng, fill_probability=fill_probability).generate()
