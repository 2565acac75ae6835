"""Plain depth-first backtracking solver."""

from __future__ import annotations
import logging

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_valid

log = logging.getLogger(__name__)


class BacktrackingSolver(BaseSolver):
    """
    Depth-First Search solver using recursive backtracking.

    Cells are filled in row-major order and digits tried in ascending order.
    There is no cell-selection heuristic and no constraint propagation: every
    trial placement goes through ``is_valid`` and is undone if the subtree
    below it fails.
    """

    name = "Backtracking"

    def _solve(self, board: SudokuBoard) -> bool:
        """Solve using DFS with backtracking."""
        solved = self._backtrack(board)
        log.debug(
            "%s: solved=%s iterations=%d nodes=%d backtracks=%d",
            self.name, solved, self.stats.iterations,
            self.stats.nodes_explored, self.stats.backtracks
        )
        return solved

    def _backtrack(self, board: SudokuBoard) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise.
        """
        self.stats.iterations += 1

        cell = board.find_empty()
        if cell is None:
            # No empty cells - solution found!
            return True

        row, col = cell
        self.stats.nodes_explored += 1

        for digit in range(1, SIZE + 1):
            if not is_valid(board, row, col, digit):
                continue

            board.set(row, col, digit)
            if self._backtrack(board):
                return True

            board.clear(row, col)
            self.stats.backtracks += 1

        return False


def solve(board: SudokuBoard) -> bool:
    """
    Solve ``board`` in place by backtracking.

    Returns:
        True with the board completed, or False with the board unchanged.
    """
    return BacktrackingSolver().solve(board)
