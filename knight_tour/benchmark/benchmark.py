"""Benchmarking framework for comparing tour solvers over start squares."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import os

from tqdm import tqdm

from ..core.board import BOARD_SIZE
from ..core.notation import square_name
from ..solvers import BaseSolver, SolverStats, WarnsdorffSolver


@dataclass
class BenchmarkResult:
    """Results from a single solver run from one start square."""
    row: int
    col: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def square(self) -> str:
        return square_name(self.row, self.col)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "row": self.row,
            "col": self.col,
            "square": self.square,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Benchmark framework for knight's tour solvers.

    Runs every solver from every requested start square and collects
    performance metrics. Which start squares a move ordering fails on is
    found empirically here rather than assumed.
    """

    def __init__(
        self,
        squares: Optional[List[Tuple[int, int]]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        timeout_seconds: float = 30.0,
        max_iterations: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            squares: Start squares as (row, col) (default: all 64).
            solvers: Dict of solver_name -> solver_instance (default: the
                     Warnsdorff solver with and without the center tie-break).
            timeout_seconds: Maximum time per square per solver.
            max_iterations: Search budget for the default solvers (default:
                            unbounded).
        """
        if squares is None:
            squares = [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
        self.squares = squares
        self.timeout_seconds = timeout_seconds

        if solvers is None:
            self.solvers = {
                "Warnsdorff+Center": WarnsdorffSolver(max_iterations=max_iterations),
                "Warnsdorff": WarnsdorffSolver(
                    use_center_tiebreak=False, max_iterations=max_iterations
                )
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.squares) * len(self.solvers)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for row, col in self.squares:
            for solver_name, solver in self.solvers.items():
                result = self._run_single(row, col, solver_name, solver)
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        row: int,
        col: int,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver from a single start square."""
        # Use ThreadPoolExecutor to detect runs over the time limit
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(solver.solve, row, col)
            try:
                solution, stats = future.result(timeout=self.timeout_seconds)
                return self._from_stats(row, col, solver_name, stats)
            except TimeoutError:
                # A running search cannot be interrupted; wait for it and
                # keep its counts, but never count it as solved
                solution, stats = future.result()
                result = self._from_stats(row, col, solver_name, stats)
                result.solved = False
                result.extra["error"] = "Timeout"
                return result
            except Exception as e:
                return self._failed(row, col, solver_name, str(e))

    def _from_stats(self, row: int, col: int, solver_name: str, stats: SolverStats) -> BenchmarkResult:
        return BenchmarkResult(
            row=row,
            col=col,
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra={k: v for k, v in stats.extra.items() if k != "start"}
        )

    def _failed(self, row: int, col: int, solver_name: str, error: str) -> BenchmarkResult:
        return BenchmarkResult(
            row=row,
            col=col,
            algorithm=solver_name,
            solved=False,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            extra={"error": error}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_squares": len(self.squares),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {}
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if not solver_results:
                continue

            solved = [r for r in solver_results if r.solved]
            times = [r.time_seconds for r in solver_results]
            backtracks = [r.backtracks for r in solver_results]

            summary["results_by_algorithm"][solver_name] = {
                "coverage": len(solved) / len(solver_results) * 100,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "avg_backtracks": sum(backtracks) / len(backtracks),
                "max_backtracks": max(backtracks),
                "closed_tours": sum(1 for r in solved if r.extra.get("closed")),
                "failed_squares": [r.square for r in solver_results if not r.solved],
                "total_solved": len(solved),
                "total_tested": len(solver_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
