"""Solvers module for Sudoku seed boards."""

from .base_solver import BaseSolver, SolverStats
from .backtracking import BacktrackingSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "solve",
]
