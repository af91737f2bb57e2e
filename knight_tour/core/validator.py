"""Validation utilities for knight's tours."""

from __future__ import annotations
import numpy as np
from typing import Optional, Tuple, TYPE_CHECKING

from .board import KNIGHT_MOVES, NUM_SQUARES

if TYPE_CHECKING:
    from .board import TourBoard


def is_knight_move(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Check if squares a and b are one knight move apart."""
    return (b[0] - a[0], b[1] - a[1]) in KNIGHT_MOVES


def is_valid_partial_tour(board: TourBoard) -> bool:
    """
    Check that the visited squares form a knight's path.

    The steps must be exactly 1..k for some k, with no repeats, and each
    consecutive pair of steps must be a knight move apart. An empty board
    is a valid (empty) path.

    Args:
        board: The board to check.

    Returns:
        True if the board is a valid in-progress tour.
    """
    steps = board.get_steps()
    if [step for step, _, _ in steps] != list(range(1, len(steps) + 1)):
        return False

    path = board.path()
    for a, b in zip(path, path[1:]):
        if not is_knight_move(a, b):
            return False

    return True


def is_valid_tour(board: TourBoard, start: Optional[Tuple[int, int]] = None) -> bool:
    """
    Check that the board holds a complete knight's tour.

    Args:
        board: The board to check.
        start: If given, the square that must hold step 1.

    Returns:
        True if every value 1..64 appears exactly once, consecutive steps
        are knight moves, and step 1 is on `start`.
    """
    values = np.sort(board.grid.flatten())
    if not np.array_equal(values, np.arange(1, NUM_SQUARES + 1)):
        return False

    if not is_valid_partial_tour(board):
        return False

    if start is not None and board.start_square() != tuple(start):
        return False

    return True


def is_closed_tour(board: TourBoard) -> bool:
    """Check if the board is a tour whose last square attacks the first."""
    if not is_valid_tour(board):
        return False
    path = board.path()
    return is_knight_move(path[-1], path[0])
