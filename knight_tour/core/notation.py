"""Parsing and formatting of square names."""

from __future__ import annotations
import re
from typing import Optional, Tuple

from .board import BOARD_SIZE, TourBoard

FILES = "ABCDEFGH"

_ALGEBRAIC = re.compile(r"^([A-Ha-h])([1-8])$")
_NUMBER = re.compile(r"[0-9]+")


def parse_coordinate(text: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Extract a square from free-form text.

    Accepts either algebraic notation ("E4", "e4", " e 4 ") or exactly two
    integers in 1-8 anywhere in the text ("4 5", "4,5"), read as
    (row, column).

    Args:
        text: User input.

    Returns:
        (row, col) with both in 0-7, or None if the text does not name a
        square.
    """
    if not text:
        return None

    match = _ALGEBRAIC.match(re.sub(r"\s+", "", text))
    if match:
        col = FILES.index(match.group(1).upper())
        row = int(match.group(2)) - 1
        return row, col

    numbers = [int(n) for n in _NUMBER.findall(text)]
    if len(numbers) == 2:
        first, second = numbers
        if 1 <= first <= BOARD_SIZE and 1 <= second <= BOARD_SIZE:
            return first - 1, second - 1

    return None


def square_name(row: int, col: int) -> str:
    """Get the algebraic name of a square, e.g. (3, 4) -> "E4"."""
    if not TourBoard.in_bounds(row, col):
        raise ValueError(f"Square ({row}, {col}) is off the board")
    return f"{FILES[col]}{row + 1}"
