"""Generator module for creating Sudoku seed boards."""

from .generator import SeedGenerator, generate_board, FILL_PROBABILITY

__all__ = ["SeedGenerator", "generate_board", "FILL_PROBABILITY"]
