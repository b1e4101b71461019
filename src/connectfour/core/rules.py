from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple

from connectfour.config import ROWS, COLS, CONNECT_N
from connectfour.types import Cell

if TYPE_CHECKING:
    from connectfour.core.board import Board

Coord = Tuple[int, int]  # (row, col)


def _build_windows() -> List[Tuple[Coord, ...]]:
    n = CONNECT_N
    windows: List[Tuple[Coord, ...]] = []

    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - n + 1):
            windows.append(tuple((r, c + i) for i in range(n)))

    # Vertical
    for r in range(ROWS - n + 1):
        for c in range(COLS):
            windows.append(tuple((r + i, c) for i in range(n)))

    # Both diagonals share one bounding window: down-right from (r, c),
    # up-right from (r + 3, c).
    for r in range(ROWS - n + 1):
        for c in range(COLS - n + 1):
            windows.append(tuple((r + i, c + i) for i in range(n)))
            windows.append(tuple((r + n - 1 - i, c + i) for i in range(n)))

    return windows


# Every run of four cells on the board, computed once.
WINDOWS: List[Tuple[Coord, ...]] = _build_windows()


def winning_line(board: Board, side: Cell) -> Optional[List[Coord]]:
    if side == Cell.EMPTY:
        return None
    g = board.grid
    for window in WINDOWS:
        if all(g[r][c] == side for r, c in window):
            return list(window)
    return None


def has_line_of_four(board: Board, side: Cell) -> bool:
    return winning_line(board, side) is not None


def check_winner_with_line(board: Board) -> Optional[Tuple[Cell, List[Coord]]]:
    for side in (Cell.HUMAN, Cell.BOT):
        line = winning_line(board, side)
        if line is not None:
            return side, line
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner_with_line(board) is None
