"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any
import time

from ..core.board import SudokuBoard


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    iterations: int = 0

    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for in-place Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> bool:
        """
        Complete the board in place.

        Args:
            board: The board to solve. Filled in on success, left exactly as
                   it was on failure.

        Returns:
            True if a solution was found.
        """
        self.reset_stats()
        solved = self._solve(board)
        self.stats.solved = solved
        return solved

    def run(self, board: SudokuBoard) -> SolverStats:
        """Solve the board in place and return timing and search statistics."""
        start_time = time.perf_counter()
        self.solve(board)
        self.stats.time_seconds = time.perf_counter() - start_time
        return self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The board to solve in place.

        Returns:
            True if a solution was found.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
