"""Core module for knight's tour board representation and validation."""

from .board import TourBoard, KNIGHT_MOVES, BOARD_SIZE, NUM_SQUARES, CENTER
from .notation import parse_coordinate, square_name
from .validator import is_knight_move, is_valid_tour, is_valid_partial_tour, is_closed_tour

__all__ = [
    "TourBoard",
    "KNIGHT_MOVES",
    "BOARD_SIZE",
    "NUM_SQUARES",
    "CENTER",
    "parse_coordinate",
    "square_name",
    "is_knight_move",
    "is_valid_tour",
    "is_valid_partial_tour",
    "is_closed_tour",
]
