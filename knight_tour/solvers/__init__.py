"""Solvers module for knight's tours."""

from .base_solver import BaseSolver, SolverStats
from .warnsdorff_solver import WarnsdorffSolver, solve_tour

__all__ = [
    "BaseSolver",
    "SolverStats",
    "WarnsdorffSolver",
    "solve_tour"
]
