"""Charts for seed-board survey results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from .survey import SurveyResult


class DensityChart:
    """Histogram of the fill ratio of surveyed seed boards."""

    def __init__(self, results: List[SurveyResult], fill_probability: float):
        """
        Initialize the chart.

        Args:
            results: Survey results to plot.
            fill_probability: Fill-attempt probability, drawn as a reference line.
        """
        self.results = results
        self.fill_probability = fill_probability

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def plot(self, path: str) -> str:
        """
        Draw the histogram and save it to ``path``.

        Returns:
            The path of the written image.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig, ax = plt.subplots(figsize=(10, 6))

        ratios = [r.fill_ratio for r in self.results]
        sns.histplot(ratios, bins=30, kde=True, ax=ax, edgecolor='black', linewidth=0.5)
        ax.axvline(self.fill_probability, color='#e74c3c', linestyle='--',
                   label=f'fill probability ({self.fill_probability:.2f})')

        ax.set_xlabel('Fraction of cells filled', fontsize=12)
        ax.set_ylabel('Boards', fontsize=12)
        ax.set_title(f'Seed Board Density ({len(ratios)} boards)', fontsize=14, fontweight='bold')
        ax.set_xlim(0, 1)
        ax.legend()

        plt.tight_layout()
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
