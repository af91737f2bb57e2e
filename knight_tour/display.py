"""Rendering of solved tours: step lists, static plots and animations."""

from __future__ import annotations
import os
from typing import List, Tuple

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
import numpy as np

from .core.board import TourBoard, BOARD_SIZE
from .core.notation import FILES, square_name

Point = Tuple[float, float]

LIGHT = "#f0d9b5"
DARK = "#b58863"
VISITED = "#9bc995"


def format_steps(board: TourBoard) -> List[str]:
    """
    List the tour one line per step, e.g. "1. (1, 1) - A1".

    Row and column are shown 1-based so they can be typed back into the
    numeric input form.
    """
    return [
        f"{step}. ({row + 1}, {col + 1}) - {square_name(row, col)}"
        for step, row, col in board.get_steps()
    ]


def square_center(row: int, col: int) -> Point:
    """Plot coordinates of a square's center (A1 at the bottom left)."""
    return col + 0.5, row + 0.5


def l_waypoint(src: Point, dst: Point) -> Point:
    """
    Corner of the L-shaped path from src to dst.

    The leg along the longer axis comes first; a tie goes horizontal first.
    """
    dx = dst[0] - src[0]
    dy = dst[1] - src[1]
    if abs(dx) >= abs(dy):
        return dst[0], src[1]
    return src[0], dst[1]


def marker_position(src: Point, dst: Point, t: float) -> Point:
    """
    Position along the L path from src to dst at progress t in [0, 1].

    Each leg gets a share of the time proportional to its length.
    """
    mid = l_waypoint(src, dst)
    adx = abs(dst[0] - src[0])
    ady = abs(dst[1] - src[1])
    total = adx + ady or 1
    split = max(adx, ady) / total

    t = min(max(t, 0.0), 1.0)
    if t < split:
        p = t / split
        a, b = src, mid
    else:
        p = (t - split) / (1 - split) if split < 1 else 1.0
        a, b = mid, dst
    return a[0] + (b[0] - a[0]) * p, a[1] + (b[1] - a[1]) * p


def _draw_board(ax, board: TourBoard, show_steps: bool = True) -> List[List[plt.Rectangle]]:
    """Draw the checkered board and return the square patches by [row][col]."""
    patches = []
    for row in range(BOARD_SIZE):
        patch_row = []
        for col in range(BOARD_SIZE):
            color = DARK if (row + col) % 2 == 0 else LIGHT
            rect = plt.Rectangle((col, row), 1, 1, facecolor=color, edgecolor='none')
            ax.add_patch(rect)
            patch_row.append(rect)

            step = board.get(row, col)
            if show_steps and step > 0:
                ax.text(col + 0.5, row + 0.5, f"{step:02d}", ha='center', va='center',
                        fontsize=9, color='#222222')
        patches.append(patch_row)

    ax.set_xlim(0, BOARD_SIZE)
    ax.set_ylim(0, BOARD_SIZE)
    ax.set_aspect('equal')
    ax.set_xticks(np.arange(BOARD_SIZE) + 0.5)
    ax.set_xticklabels(list(FILES))
    ax.set_yticks(np.arange(BOARD_SIZE) + 0.5)
    ax.set_yticklabels([str(i + 1) for i in range(BOARD_SIZE)])
    ax.tick_params(length=0)
    return patches


def plot_tour(board: TourBoard, path: str) -> str:
    """
    Save a picture of the tour: numbered squares joined by the knight's path.

    Returns:
        The path of the written image.
    """
    fig, ax = plt.subplots(figsize=(7, 7))
    _draw_board(ax, board)

    points = [square_center(r, c) for r, c in board.path()]
    if points:
        xs, ys = zip(*points)
        ax.plot(xs, ys, color='#1f4e79', linewidth=1.2, alpha=0.7)
        ax.plot(xs[0], ys[0], 'o', color='#2ecc71', markersize=10)
        ax.plot(xs[-1], ys[-1], 's', color='#e74c3c', markersize=9)

    start = board.start_square()
    if start is not None:
        ax.set_title(f"Knight's tour from {square_name(*start)}", fontsize=14, fontweight='bold')

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return path


def animate_tour(
    board: TourBoard,
    path: str,
    ms_per_step: int = 350,
    frames_per_step: int = 8
) -> str:
    """
    Save a GIF of a knight marker walking the tour in L-shaped moves.

    Squares are shaded as the marker lands on them.

    Args:
        board: A board with at least one visited square.
        path: Output file (GIF).
        ms_per_step: Duration of each knight move.
        frames_per_step: Frames rendered per move.

    Returns:
        The path of the written animation.
    """
    squares = board.path()
    if not squares:
        raise ValueError("Board has no visited squares to animate")

    fig, ax = plt.subplots(figsize=(6, 6))
    patches = _draw_board(ax, board, show_steps=False)
    marker = ax.text(*square_center(*squares[0]), '♞', ha='center', va='center',
                     fontsize=28, color='black', zorder=3)

    def update(frame: int):
        move, sub = divmod(frame, frames_per_step)
        if move >= len(squares) - 1:
            pos = square_center(*squares[-1])
            landed = len(squares)
        else:
            src = square_center(*squares[move])
            dst = square_center(*squares[move + 1])
            pos = marker_position(src, dst, sub / frames_per_step)
            landed = move + 1

        for row, col in squares[:landed]:
            patches[row][col].set_facecolor(VISITED)
        marker.set_position(pos)
        return [marker]

    total_frames = (len(squares) - 1) * frames_per_step + 1
    interval = ms_per_step / frames_per_step
    anim = FuncAnimation(fig, update, frames=total_frames, interval=interval, blit=False)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    anim.save(path, writer=PillowWriter(fps=max(1, round(1000 / interval))))
    plt.close(fig)

    return path
