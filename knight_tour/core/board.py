"""8x8 board representation for knight's tour search."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE

# Fixed enumeration order; ties in move ordering fall back to this order.
KNIGHT_MOVES: Tuple[Tuple[int, int], ...] = (
    (2, 1), (1, 2), (-1, 2), (-2, 1),
    (-2, -1), (-1, -2), (1, -2), (2, -1),
)

CENTER = (3, 3)


class TourBoard:
    """
    An 8x8 grid of step numbers.

    Each cell is 0 (unvisited) or the step (1-64) at which the knight
    landed on it. Row 0 / column 0 is square A1.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial grid. If None, creates an empty board.
        """
        if grid is not None:
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Grid shape must be ({BOARD_SIZE}, {BOARD_SIZE})")
            if grid.min() < 0 or grid.max() > NUM_SQUARES:
                raise ValueError(f"Cell values must be 0-{NUM_SQUARES}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int32)

    def copy(self) -> TourBoard:
        """Create a deep copy of the board."""
        new_board = TourBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get the step at (row, col). 0 means unvisited."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, step: int) -> None:
        """Set the step at (row, col). Use 0 to clear."""
        if step < 0 or step > NUM_SQUARES:
            raise ValueError(f"Step must be 0-{NUM_SQUARES}, got {step}")
        self.grid[row, col] = step

    def clear(self, row: int, col: int) -> None:
        """Mark (row, col) as unvisited."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if the square has not been visited."""
        return self.grid[row, col] == 0

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def unvisited_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get the unvisited squares one knight move away from (row, col).

        Returns:
            Squares in KNIGHT_MOVES order.
        """
        neighbors = []
        for dr, dc in KNIGHT_MOVES:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c) and self.grid[r, c] == 0:
                neighbors.append((r, c))
        return neighbors

    def degree(self, row: int, col: int) -> int:
        """Count onward moves from (row, col) under the current board state."""
        count = 0
        for dr, dc in KNIGHT_MOVES:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c) and self.grid[r, c] == 0:
                count += 1
        return count

    def count_visited(self) -> int:
        return int(np.sum(self.grid != 0))

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def is_complete(self) -> bool:
        """Check if every square has been visited."""
        return self.count_empty() == 0

    def start_square(self) -> Optional[Tuple[int, int]]:
        """Get the square holding step 1, or None if there is none."""
        found = np.argwhere(self.grid == 1)
        if len(found) == 0:
            return None
        return int(found[0][0]), int(found[0][1])

    def get_steps(self) -> List[Tuple[int, int, int]]:
        """
        Get the visited squares in the order they were visited.

        Returns:
            List of (step, row, col) tuples sorted by step, skipping
            unvisited squares.
        """
        steps = []
        for i in range(BOARD_SIZE):
            for j in range(BOARD_SIZE):
                step = int(self.grid[i, j])
                if step > 0:
                    steps.append((step, i, j))
        steps.sort()
        return steps

    def path(self) -> List[Tuple[int, int]]:
        """Get the visited squares as (row, col) in step order."""
        return [(row, col) for _, row, col in self.get_steps()]

    def to_2d_list(self) -> List[List[int]]:
        return self.grid.tolist()

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> TourBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board with rank 8 at the top."""
        horizontal_sep = '  +' + '-' * (BOARD_SIZE * 3 + 1) + '+'
        lines = [horizontal_sep]

        for i in reversed(range(BOARD_SIZE)):
            row_str = f'{i + 1} |'
            for j in range(BOARD_SIZE):
                step = self.grid[i, j]
                row_str += ' ..' if step == 0 else f' {step:02d}'
            lines.append(row_str + ' |')

        lines.append(horizontal_sep)
        lines.append('    ' + '  '.join(chr(ord('A') + j) for j in range(BOARD_SIZE)))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"TourBoard(visited={self.count_visited()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TourBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())
