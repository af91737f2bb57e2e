"""Backtracking solver guided by Warnsdorff's rule."""

from __future__ import annotations
from typing import Optional, List, Tuple

from .base_solver import BaseSolver
from ..core.board import TourBoard, NUM_SQUARES, CENTER


class WarnsdorffSolver(BaseSolver):
    """
    Depth-first search over knight moves with backtracking.

    Features:
    - Warnsdorff's rule: try the most constrained square (fewest onward
      moves) first
    - Tie-break on squared distance to the board center
    - Optional iteration budget for callers that need to bound the search

    The first tour found is returned; the search does not enumerate tours.
    """

    name = "Warnsdorff+Backtracking"

    def __init__(self, use_center_tiebreak: bool = True, max_iterations: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            use_center_tiebreak: If True, equal-degree moves are ordered by
                                 distance to the center. If False, they keep
                                 their enumeration order.
            max_iterations: Stop and report no tour after this many
                            recursive calls. None searches to completion.
        """
        super().__init__()
        self.use_center_tiebreak = use_center_tiebreak
        self.max_iterations = max_iterations
        self._aborted = False

    def _solve(self, row: int, col: int) -> Optional[TourBoard]:
        """Solve by DFS from the start square."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
        self._aborted = False

        board = TourBoard()
        board.set(row, col, 1)

        found = self._dfs(board, row, col, 1)
        if self._aborted:
            self.stats.extra["aborted"] = True
        if found:
            return board
        return None

    def _dfs(self, board: TourBoard, row: int, col: int, step: int) -> bool:
        """
        Extend the path from (row, col), which holds `step`.

        Returns True if the board was completed. On False the board is left
        as it was on entry.
        """
        self.stats.iterations += 1

        if step == NUM_SQUARES:
            return True

        if self.max_iterations is not None and self.stats.iterations > self.max_iterations:
            self._aborted = True
            return False

        for r, c in self.ordered_moves(board, row, col):
            board.set(r, c, step + 1)
            self.stats.nodes_explored += 1

            if self._dfs(board, r, c, step + 1):
                return True

            board.clear(r, c)
            self.stats.backtracks += 1

            if self._aborted:
                return False

        return False

    def ordered_moves(self, board: TourBoard, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get the unvisited knight moves from (row, col) in search order.

        Sorted by degree ascending, then (if enabled) by squared distance
        to the center. The sort is stable, so remaining ties keep the
        KNIGHT_MOVES order.
        """
        moves = board.unvisited_neighbors(row, col)

        if self.use_center_tiebreak:
            return sorted(moves, key=lambda m: (board.degree(*m), _center_distance(*m)))
        return sorted(moves, key=lambda m: board.degree(*m))


def _center_distance(row: int, col: int) -> int:
    return (row - CENTER[0]) ** 2 + (col - CENTER[1]) ** 2


def solve_tour(row: int, col: int) -> Optional[TourBoard]:
    """
    Find a knight's tour starting from (row, col).

    Args:
        row: Start row, 0-7.
        col: Start column, 0-7.

    Returns:
        The completed board (step 1 on the start square), or None if the
        search found no tour.
    """
    solution, _ = WarnsdorffSolver().solve(row, col)
    return solution
