"""Unit tests for the tour board and validation."""

import pytest
import numpy as np
from knight_tour.core.board import TourBoard, KNIGHT_MOVES
from knight_tour.core.validator import (
    is_knight_move, is_valid_tour, is_valid_partial_tour, is_closed_tour
)


def board_from_path(path):
    """Build a board by numbering the squares of a path 1..n."""
    board = TourBoard()
    for step, (row, col) in enumerate(path, 1):
        board.set(row, col, step)
    return board


# A known open tour from A1, listed as the step number on each square
OPEN_TOUR = [
    [1, 38, 55, 34, 3, 36, 19, 22],
    [54, 47, 2, 37, 20, 23, 4, 17],
    [39, 56, 33, 46, 35, 18, 21, 10],
    [48, 53, 40, 57, 24, 11, 16, 5],
    [59, 32, 45, 52, 41, 26, 9, 12],
    [44, 49, 58, 25, 62, 15, 6, 27],
    [31, 60, 51, 42, 29, 8, 13, 64],
    [50, 43, 30, 61, 14, 63, 28, 7],
]


class TestTourBoard:
    """Tests for TourBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 8x8 board."""
        board = TourBoard()
        assert board.grid.shape == (8, 8)
        assert board.count_empty() == 64
        assert board.count_visited() == 0
        assert not board.is_complete()

    def test_set_and_get(self):
        """Test setting and clearing steps."""
        board = TourBoard()
        board.set(3, 4, 12)
        assert board.get(3, 4) == 12
        assert not board.is_empty(3, 4)

        board.clear(3, 4)
        assert board.is_empty(3, 4)

    def test_set_rejects_out_of_range_step(self):
        board = TourBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 65)
        with pytest.raises(ValueError):
            board.set(0, 0, -1)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            TourBoard(np.zeros((9, 9), dtype=np.int32))

    def test_in_bounds(self):
        assert TourBoard.in_bounds(0, 0)
        assert TourBoard.in_bounds(7, 7)
        assert not TourBoard.in_bounds(-1, 3)
        assert not TourBoard.in_bounds(3, 8)

    def test_move_table_order(self):
        """Test the fixed knight move enumeration order."""
        assert KNIGHT_MOVES == (
            (2, 1), (1, 2), (-1, 2), (-2, 1),
            (-2, -1), (-1, -2), (1, -2), (2, -1),
        )

    def test_unvisited_neighbors(self):
        """Test neighbor enumeration skips visited and off-board squares."""
        board = TourBoard()
        assert board.unvisited_neighbors(0, 0) == [(2, 1), (1, 2)]

        board.set(2, 1, 1)
        assert board.unvisited_neighbors(0, 0) == [(1, 2)]

    def test_degree(self):
        """Test onward move counts."""
        board = TourBoard()
        assert board.degree(0, 0) == 2
        assert board.degree(3, 3) == 8
        assert board.degree(0, 1) == 3

        board.set(0, 0, 1)
        assert board.degree(2, 1) == 5

    def test_get_steps_sorted_by_step(self):
        board = TourBoard()
        board.set(1, 2, 2)
        board.set(0, 0, 1)
        board.set(2, 4, 3)

        assert board.get_steps() == [(1, 0, 0), (2, 1, 2), (3, 2, 4)]
        assert board.path() == [(0, 0), (1, 2), (2, 4)]
        assert board.start_square() == (0, 0)

    def test_start_square_missing(self):
        assert TourBoard().start_square() is None

    def test_2d_list_conversion(self):
        board = TourBoard.from_2d_list(OPEN_TOUR)
        assert board.to_2d_list() == OPEN_TOUR
        assert board.is_complete()

    def test_copy(self):
        """Test board copy."""
        board = TourBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_equality(self):
        a = TourBoard.from_2d_list(OPEN_TOUR)
        b = TourBoard.from_2d_list(OPEN_TOUR)
        assert a == b
        assert hash(a) == hash(b)
        assert a != TourBoard()

    def test_str_layout(self):
        """Test rank 8 is printed first and files run A-H."""
        board = TourBoard()
        board.set(0, 0, 1)
        lines = str(board).splitlines()

        assert lines[1].startswith("8 |")
        assert lines[8].startswith("1 | 01")
        assert lines[-1].split() == list("ABCDEFGH")


class TestValidator:
    """Tests for validation utilities."""

    def test_is_knight_move(self):
        assert is_knight_move((0, 0), (2, 1))
        assert is_knight_move((4, 4), (3, 2))
        assert not is_knight_move((0, 0), (1, 1))
        assert not is_knight_move((0, 0), (0, 0))

    def test_valid_tour(self):
        board = TourBoard.from_2d_list(OPEN_TOUR)
        assert is_valid_tour(board)
        assert is_valid_tour(board, start=(0, 0))

    def test_wrong_start(self):
        board = TourBoard.from_2d_list(OPEN_TOUR)
        assert not is_valid_tour(board, start=(3, 4))

    def test_duplicate_step_rejected(self):
        data = [row[:] for row in OPEN_TOUR]
        data[7][7] = 1
        assert not is_valid_tour(TourBoard.from_2d_list(data))

    def test_zero_rejected(self):
        data = [row[:] for row in OPEN_TOUR]
        data[3][3] = 0
        assert not is_valid_tour(TourBoard.from_2d_list(data))

    def test_non_knight_step_rejected(self):
        """Swapping two steps keeps the values a permutation but breaks the path."""
        data = [row[:] for row in OPEN_TOUR]
        data[0][0], data[0][1] = data[0][1], data[0][0]
        board = TourBoard.from_2d_list(data)
        assert not is_valid_tour(board)

    def test_partial_tour(self):
        board = board_from_path([(0, 0), (2, 1), (4, 2)])
        assert is_valid_partial_tour(board)
        assert not is_valid_tour(board)

        # Gap in the step numbering
        board.set(4, 2, 4)
        assert not is_valid_partial_tour(board)

    def test_empty_board_is_valid_partial(self):
        assert is_valid_partial_tour(TourBoard())

    def test_open_tour_is_not_closed(self):
        """Step 64 ends on G7, which is not a knight move from A1."""
        board = TourBoard.from_2d_list(OPEN_TOUR)
        assert board.path()[-1] == (6, 7)
        assert not is_closed_tour(board)

    def test_incomplete_board_is_not_closed(self):
        board = board_from_path([(0, 0), (2, 1), (1, 3), (0, 1)])
        assert not is_closed_tour(board)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
