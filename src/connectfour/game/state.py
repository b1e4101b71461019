from __future__ import annotations
from dataclasses import dataclass

from connectfour.core.board import Board
from connectfour.types import Cell


@dataclass(slots=True)
class GameState:
    board: Board
    current: Cell
    last_status: str = ""
