"""Tests for tour rendering."""

import matplotlib
matplotlib.use("Agg")

import pytest
from knight_tour import solve_tour
from knight_tour.core.board import TourBoard
from knight_tour.display import (
    format_steps, square_center, l_waypoint, marker_position, plot_tour, animate_tour
)


def short_board():
    """A1 -> C2 -> E3, enough for rendering tests."""
    board = TourBoard()
    for step, (r, c) in enumerate([(0, 0), (1, 2), (2, 4)], 1):
        board.set(r, c, step)
    return board


class TestFormatSteps:
    """Tests for the step list."""

    def test_lines(self):
        assert format_steps(short_board()) == [
            "1. (1, 1) - A1",
            "2. (2, 3) - C2",
            "3. (3, 5) - E3",
        ]

    def test_empty_board(self):
        assert format_steps(TourBoard()) == []


class TestLPath:
    """Tests for the L-shaped marker path."""

    def test_square_center(self):
        assert square_center(0, 0) == (0.5, 0.5)
        assert square_center(3, 4) == (4.5, 3.5)

    def test_longer_axis_first(self):
        # Two columns right, one row up: horizontal leg first
        assert l_waypoint((0.5, 0.5), (2.5, 1.5)) == (2.5, 0.5)
        # One column right, two rows up: vertical leg first
        assert l_waypoint((0.5, 0.5), (1.5, 2.5)) == (0.5, 2.5)

    def test_endpoints(self):
        src, dst = (0.5, 0.5), (2.5, 1.5)
        assert marker_position(src, dst, 0.0) == src
        assert marker_position(src, dst, 1.0) == dst

    def test_corner_reached_at_leg_split(self):
        """The long leg takes 2/3 of the move time."""
        src, dst = (0.5, 0.5), (2.5, 1.5)
        x, y = marker_position(src, dst, 2 / 3)
        assert x == pytest.approx(2.5)
        assert y == pytest.approx(0.5)

    def test_progress_is_clamped(self):
        src, dst = (0.5, 0.5), (1.5, 2.5)
        assert marker_position(src, dst, -1.0) == src
        assert marker_position(src, dst, 2.0) == dst


class TestPlots:
    """Tests for image and animation output."""

    def test_plot_tour(self, tmp_path):
        board = solve_tour(0, 0)
        path = plot_tour(board, str(tmp_path / "tour.png"))
        assert (tmp_path / "tour.png").exists()
        assert path.endswith("tour.png")

    def test_animate_tour(self, tmp_path):
        path = animate_tour(short_board(), str(tmp_path / "out" / "tour.gif"), frames_per_step=2)
        assert (tmp_path / "out" / "tour.gif").exists()
        assert path.endswith("tour.gif")

    def test_animate_empty_board(self, tmp_path):
        with pytest.raises(ValueError):
            animate_tour(TourBoard(), str(tmp_path / "tour.gif"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
