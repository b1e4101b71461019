from __future__ import annotations
from typing import Optional, Iterable, Set

from connectfour import config
from connectfour.core.board import Board
from connectfour.core.rules import Coord
from connectfour.ui.colors import c, piece, BOLD, DIM, FG_CYAN


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = [piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
