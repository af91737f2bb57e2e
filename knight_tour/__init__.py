"""Knight's tour solver for the 8x8 board."""

from .core import TourBoard, parse_coordinate, square_name
from .solvers import WarnsdorffSolver, solve_tour

__version__ = "1.0.0"

__all__ = ["TourBoard", "parse_coordinate", "square_name", "WarnsdorffSolver", "solve_tour"]
