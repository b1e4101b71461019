# src/connectfour/types.py

from __future__ import annotations
from enum import IntEnum
from typing import Literal, NewType


class Cell(IntEnum):
    EMPTY = 0
    HUMAN = 1
    BOT = -1


Move = NewType("Move", int)   # column index 0..6
TieBreak = Literal["random", "first"]


def other(side: Cell) -> Cell:
    if side == Cell.EMPTY:
        raise ValueError("EMPTY has no opponent.")
    return Cell(-int(side))
