"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import time
import tracemalloc

from ..core.board import TourBoard
from ..core.validator import is_valid_tour, is_closed_tour


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
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
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for knight's tour solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, row: int, col: int) -> tuple[Optional[TourBoard], SolverStats]:
        """
        Find a tour from (row, col) with timing and memory tracking.

        Args:
            row: Start row, 0-7.
            col: Start column, 0-7.

        Returns:
            Tuple of (complete board or None, stats).
        """
        if not TourBoard.in_bounds(row, col):
            raise ValueError(f"Start square ({row}, {col}) is off the board")

        self.stats = SolverStats(algorithm=self.name)
        self.stats.extra["start"] = [row, col]

        # A tracing session started by the caller is left running
        was_tracing = tracemalloc.is_tracing()
        if not was_tracing:
            tracemalloc.start()
        baseline, _ = tracemalloc.get_traced_memory()
        start_time = time.perf_counter()

        try:
            solution = self._solve(row, col)
            self.stats.solved = solution is not None and is_valid_tour(solution, (row, col))
        except Exception as e:
            self.stats.extra["error"] = str(e)
            solution = None
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            current, peak = tracemalloc.get_traced_memory()
            if not was_tracing:
                tracemalloc.stop()
            self.stats.memory_bytes = max(peak - baseline, 0)

        # Partial or invalid boards never leave the solver
        if not self.stats.solved:
            return None, self.stats

        self.stats.extra["closed"] = is_closed_tour(solution)
        return solution, self.stats

    @abstractmethod
    def _solve(self, row: int, col: int) -> Optional[TourBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            row, col: A start square already known to be on the board.

        Returns:
            The completed board, or None if no tour was found.
        """
        pass
