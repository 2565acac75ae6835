"""Unit tests for the backtracking solver."""

import numpy as np
import pytest
from sudoku_seed.core.board import SudokuBoard
from sudoku_seed.core.validator import validate_solution
from sudoku_seed.generator import SeedGenerator
from sudoku_seed.solvers import BacktrackingSolver, solve
from sudoku_seed.solvers import backtracking


class SolutionGuidedRng:
    """
    Random source whose digits come from a known solution.

    Fill attempts are still decided by a seeded numpy generator, so the
    resulting seed board is random but always solvable.
    """

    def __init__(self, solution, seed):
        self.rng = np.random.default_rng(seed)
        self.cells = solution.to_string()
        self.cell = -1

    def random(self):
        self.cell += 1
        return self.rng.random()

    def integers(self, low, high):
        return int(self.cells[self.cell])


def _assert_permutation_complete(board):
    expected = list(range(1, 10))
    for i in range(9):
        assert sorted(board.get_row(i).tolist()) == expected
        assert sorted(board.get_col(i).tolist()) == expected
    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            assert sorted(board.get_box(box_row, box_col).tolist()) == expected


class TestBacktrackingSolver:
    """Tests for the backtracking solver."""

    def test_solve_puzzle(self, puzzle, solution):
        """Test solving a known puzzle."""
        assert solve(puzzle)
        assert puzzle.is_solved()
        assert puzzle == solution

    def test_complete_board_unchanged(self, solution):
        """A full legal board is already solved."""
        before = solution.copy()
        solver = BacktrackingSolver()

        assert solver.solve(solution)
        assert solution == before
        assert solver.stats.iterations == 1
        assert solver.stats.nodes_explored == 0

    def test_solve_empty_board(self):
        board = SudokuBoard()

        assert solve(board)
        _assert_permutation_complete(board)

    def test_empty_board_first_row_is_ascending(self):
        """Digits are tried in ascending order, so row 0 comes out 1-9."""
        board = SudokuBoard()
        solve(board)
        assert board.get_row(0).tolist() == list(range(1, 10))

    def test_unsolvable_restores_board(self, unsolvable):
        """Failed search leaves every cell as it was on entry."""
        before = unsolvable.copy()
        solver = BacktrackingSolver()

        assert not solver.solve(unsolvable)
        assert unsolvable == before
        assert solver.stats.backtracks == 3
        assert not solver.stats.solved

    def test_every_trial_goes_through_checker(self, puzzle, monkeypatch):
        calls = []
        original = backtracking.is_valid

        def counting_is_valid(board, row, col, digit):
            calls.append((row, col, digit))
            return original(board, row, col, digit)

        monkeypatch.setattr(backtracking, "is_valid", counting_is_valid)
        solver = BacktrackingSolver()

        assert solver.solve(puzzle)
        # Each branched cell checks at least one digit
        assert len(calls) >= solver.stats.nodes_explored
        assert calls[0] == (0, 2, 1)

    def test_stats_collected(self, puzzle):
        """Test that stats are collected."""
        stats = BacktrackingSolver().run(puzzle)

        assert stats.solved
        assert stats.algorithm == "Backtracking"
        assert stats.time_seconds >= 0
        assert stats.iterations > 0
        assert stats.to_dict()["solved"] is True

    def test_stats_reset_between_runs(self, puzzle):
        solver = BacktrackingSolver()
        first = solver.run(puzzle.copy()).iterations
        second = solver.run(puzzle.copy()).iterations
        assert first == second


class TestEndToEnd:
    """Generate a seed board, solve it, render it."""

    def test_generate_then_solve(self, solution):
        rng = SolutionGuidedRng(solution, seed=42)
        seed = SeedGenerator(rng=rng).generate()
        assert seed.is_valid()
        assert seed.count_filled() > 0

        board = seed.copy()
        assert solve(board)
        _assert_permutation_complete(board)
        assert validate_solution(seed, board)

        rows = [line for line in str(board).split("\n") if not line.startswith("-")]
        assert len(rows) == 9
        for row in rows:
            assert len(row.replace("|", "").split()) == 9


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
