"""Batch statistics over generated seed boards."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

import numpy as np
from tqdm import tqdm

from ..generator import SeedGenerator, FILL_PROBABILITY
from ..solvers import BacktrackingSolver


@dataclass
class SurveyResult:
    """Measurements for a single generated board."""
    board_id: int
    filled: int
    fill_ratio: float
    legal: bool
    solved: Optional[bool] = None
    time_seconds: Optional[float] = None
    backtracks: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "board_id": self.board_id,
            "filled": self.filled,
            "fill_ratio": self.fill_ratio,
            "legal": self.legal,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "backtracks": self.backtracks,
            **self.extra
        }


class Survey:
    """
    Generate many seed boards and collect density and legality figures.

    With ``solve=True`` each board is also handed to the backtracking solver.
    Sparse random seeds can be unsolvable and naive search has no time limit,
    so solving is off by default.
    """

    def __init__(
        self,
        boards: int = 1000,
        seed: Optional[int] = None,
        fill_probability: float = FILL_PROBABILITY,
        solve: bool = False
    ):
        """
        Initialize the survey.

        Args:
            boards: Number of seed boards to generate.
            seed: Random seed for reproducibility.
            fill_probability: Fill-attempt probability passed to the generator.
            solve: If True, also solve every board.
        """
        if boards < 1:
            raise ValueError(f"boards must be positive, got {boards}")

        self.boards = boards
        self.seed = seed
        self.fill_probability = fill_probability
        self.solve = solve
        self.results: List[SurveyResult] = []

    def run(self, show_progress: bool = True) -> List[SurveyResult]:
        """
        Run the survey.

        Returns:
            List of SurveyResult objects, one per board.
        """
        generator = SeedGenerator(seed=self.seed, fill_probability=self.fill_probability)
        solver = BacktrackingSolver() if self.solve else None

        self.results = []
        for board_id in tqdm(range(self.boards), desc="Surveying", disable=not show_progress):
            board = generator.generate()
            result = SurveyResult(
                board_id=board_id,
                filled=board.count_filled(),
                fill_ratio=board.fill_ratio(),
                legal=board.is_valid()
            )

            if solver is not None:
                stats = solver.run(board)
                result.solved = stats.solved
                result.time_seconds = stats.time_seconds
                result.backtracks = stats.backtracks

            self.results.append(result)

        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from survey results."""
        if not self.results:
            raise RuntimeError("Survey has not been run")

        ratios = np.array([r.fill_ratio for r in self.results])
        summary = {
            "boards": len(self.results),
            "fill_probability": self.fill_probability,
            "mean_fill_ratio": float(ratios.mean()),
            "min_fill_ratio": float(ratios.min()),
            "max_fill_ratio": float(ratios.max()),
            "legal": sum(1 for r in self.results if r.legal),
        }

        if self.solve:
            times = [r.time_seconds for r in self.results]
            summary["solved"] = sum(1 for r in self.results if r.solved)
            summary["avg_time_seconds"] = sum(times) / len(times)
            summary["max_time_seconds"] = max(times)

        return summary
