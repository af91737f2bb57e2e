"""Tests for square name parsing and formatting."""

import pytest
from knight_tour import parse_coordinate, square_name


class TestParseCoordinate:
    """Tests for parse_coordinate."""

    @pytest.mark.parametrize("text", ["E4", "e4", " e4 ", "E 4", "e\t4\n"])
    def test_algebraic(self, text):
        assert parse_coordinate(text) == (3, 4)

    def test_corners(self):
        assert parse_coordinate("A1") == (0, 0)
        assert parse_coordinate("h8") == (7, 7)
        assert parse_coordinate("H1") == (0, 7)

    @pytest.mark.parametrize("text", ["4 5", "4,5", "(4, 5)", "row 4 col 5"])
    def test_two_numbers_are_row_then_column(self, text):
        assert parse_coordinate(text) == (3, 4)

    def test_numeric_bounds(self):
        assert parse_coordinate("1 1") == (0, 0)
        assert parse_coordinate("8 8") == (7, 7)

    @pytest.mark.parametrize("text", [
        "Z9",       # letter and digit both off the board
        "",
        "   ",
        "I4",       # file past H
        "E9",       # rank past 8
        "E0",
        "0 5",
        "4 9",
        "4",        # one number
        "1 2 3",    # three numbers
        "E44",
        "knight",
        "٤ ٥",   # Arabic-Indic digits
        "４ ５",   # fullwidth digits
    ])
    def test_no_match(self, text):
        assert parse_coordinate(text) is None

    def test_none_input(self):
        assert parse_coordinate(None) is None

    def test_never_raises_on_odd_input(self):
        for text in ["\x00", "♞", "E4E4", "--", "12345678901234567890 3"]:
            parse_coordinate(text)


class TestSquareName:
    """Tests for square_name."""

    def test_names(self):
        assert square_name(0, 0) == "A1"
        assert square_name(3, 4) == "E4"
        assert square_name(7, 7) == "H8"

    def test_inverse_of_parse(self):
        for row in range(8):
            for col in range(8):
                assert parse_coordinate(square_name(row, col)) == (row, col)

    def test_off_board(self):
        with pytest.raises(ValueError):
            square_name(8, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
