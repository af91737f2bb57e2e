"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from ..core.board import BOARD_SIZE
from ..core.notation import FILES
from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for knight's tour benchmark results.

    Creates per-square heatmaps and per-solver comparison charts.
    """

    # Color palette for solvers
    COLORS = {
        "Warnsdorff+Center": "#2ecc71",  # Green
        "Warnsdorff": "#3498db",         # Blue
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    @property
    def algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        charts = []

        for algo in self.algorithms:
            charts.append(self.plot_square_heatmap(algo, "time_seconds"))
            charts.append(self.plot_square_heatmap(algo, "backtracks"))
        charts.append(self.plot_coverage_comparison())

        return charts

    def _square_grid(self, algorithm: str, metric: str) -> np.ndarray:
        """Lay out one metric per start square, rank 8 in the top row."""
        grid = np.full((BOARD_SIZE, BOARD_SIZE), np.nan)
        for r in self.results:
            if r.algorithm == algorithm:
                grid[BOARD_SIZE - 1 - r.row, r.col] = getattr(r, metric)
        return grid

    def plot_square_heatmap(self, algorithm: str, metric: str) -> str:
        """Create a board-shaped heatmap of a metric by start square."""
        fig, ax = plt.subplots(figsize=(8, 7))

        grid = self._square_grid(algorithm, metric)
        fmt = '.3f' if metric == "time_seconds" else '.0f'

        sns.heatmap(
            grid, ax=ax, annot=True, fmt=fmt, cmap="viridis",
            xticklabels=list(FILES),
            yticklabels=[str(BOARD_SIZE - i) for i in range(BOARD_SIZE)],
            cbar_kws={"label": metric.replace('_', ' ')}
        )

        # Mark start squares the solver failed from
        for r in self.results:
            if r.algorithm == algorithm and not r.solved:
                ax.add_patch(plt.Rectangle(
                    (r.col, BOARD_SIZE - 1 - r.row), 1, 1,
                    fill=False, edgecolor='red', linewidth=2
                ))

        ax.set_xlabel('File', fontsize=12)
        ax.set_ylabel('Rank', fontsize=12)
        ax.set_title(f'{algorithm}: {metric.replace("_", " ")} by start square',
                     fontsize=14, fontweight='bold')

        plt.tight_layout()
        slug = algorithm.lower().replace('+', '_')
        path = os.path.join(self.output_dir, f"heatmap_{slug}_{metric}.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_coverage_comparison(self) -> str:
        """Create bar chart of the share of start squares each solver completed."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self.algorithms
        coverage = []
        colors = []

        for algo in algorithms:
            algo_results = [r for r in self.results if r.algorithm == algo]
            solved = sum(1 for r in algo_results if r.solved)
            coverage.append(solved / len(algo_results) * 100)
            colors.append(self.COLORS.get(algo, "#95a5a6"))

        bars = ax.bar(algorithms, coverage, color=colors, edgecolor='black', linewidth=0.5)

        for bar, value in zip(bars, coverage):
            height = bar.get_height()
            ax.annotate(f'{value:.0f}%',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Solver', fontsize=12)
        ax.set_ylabel('Start squares solved (%)', fontsize=12)
        ax.set_title('Tour Coverage by Solver', fontsize=14, fontweight='bold')
        ax.set_ylim(0, 115)
        ax.axhline(y=100, color='gray', linestyle='--', alpha=0.3)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "coverage_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Solver | Coverage | Avg Time | Max Time | Avg Backtracks | Failed Squares |",
            "|--------|----------|----------|----------|----------------|----------------|"
        ]

        for algo in self.algorithms:
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            coverage = (solved / len(algo_results)) * 100

            avg_time = np.mean([r.time_seconds for r in algo_results])
            max_time = np.max([r.time_seconds for r in algo_results])
            avg_backtracks = np.mean([r.backtracks for r in algo_results])
            failed = ", ".join(r.square for r in algo_results if not r.solved) or "-"

            lines.append(
                f"| {algo} | {coverage:.1f}% | {avg_time:.4f}s | {max_time:.4f}s "
                f"| {avg_backtracks:,.1f} | {failed} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
