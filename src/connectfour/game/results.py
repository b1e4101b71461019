from __future__ import annotations
from dataclasses import dataclass
from typing import List, Literal, Optional

from connectfour.core.board import Board
from connectfour.core.rules import Coord, check_winner_with_line, is_draw
from connectfour.types import Cell

Reason = Literal["win", "draw", "quit"]


@dataclass(frozen=True)
class GameOutcome:
    winner: Optional[Cell]
    reason: Reason
    plies: int
    line: Optional[List[Coord]] = None

    def describe(self) -> str:
        if self.reason == "quit":
            return "Game quit."
        if self.reason == "draw":
            return "Draw game."
        who = "You win!" if self.winner == Cell.HUMAN else "Bot wins!"
        return f"{who} ({self.plies} plies)"


def terminal_outcome(board: Board, plies: int) -> Optional[GameOutcome]:
    """Win or full board, else None. A win on the last cell counts as a win."""
    w = check_winner_with_line(board)
    if w is not None:
        side, line = w
        return GameOutcome(winner=side, reason="win", plies=plies, line=line)
    if is_draw(board):
        return GameOutcome(winner=None, reason="draw", plies=plies)
    return None
