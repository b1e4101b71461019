# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from connectfour.config import ROWS, COLS, GLYPHS
from connectfour.core import rules
from connectfour.types import Cell, Move

_FROM_GLYPH = {glyph: cell for cell, glyph in GLYPHS.items()}


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(COLS)] for _ in range(ROWS)]

    @property
    def rows(self) -> int:
        return ROWS

    @property
    def cols(self) -> int:
        return COLS

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "Board":
        """
        Build a board from render()-style text, top row first.
        Whitespace between glyphs is optional.
        """
        if len(lines) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(lines)}.")

        grid: List[List[Cell]] = []
        for line in lines:
            glyphs = line.replace(" ", "")
            if len(glyphs) != COLS:
                raise ValueError(f"Expected {COLS} cells per row, got {line!r}.")
            try:
                grid.append([_FROM_GLYPH[g] for g in glyphs])
            except KeyError as e:
                raise ValueError(f"Unknown glyph {e.args[0]!r}.") from None

        for c in range(COLS):
            seen_piece = False
            for r in range(ROWS):
                if grid[r][c] != Cell.EMPTY:
                    seen_piece = True
                elif seen_piece:
                    raise ValueError(f"Floating piece in column {c + 1}.")

        return cls(grid)

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def legal_moves(self) -> List[Move]:
        return [Move(c) for c in range(COLS) if self.grid[0][c] == Cell.EMPTY]

    def is_full(self) -> bool:
        return all(self.grid[0][c] != Cell.EMPTY for c in range(COLS))

    def drop(self, col: int, side: Cell) -> Optional[int]:
        """
        Place a piece in the lowest empty row of `col`.
        Returns the row it landed on, or None if the column is full or out of range.
        """
        c = int(col)
        if c < 0 or c >= COLS or side == Cell.EMPTY:
            return None

        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][c] == Cell.EMPTY:
                self.grid[r][c] = side
                return r
        return None

    def apply_move(self, col: int, side: Cell) -> bool:
        return self.drop(col, side) is not None

    def undo(self, col: int) -> None:
        """
        Remove the top-most piece from a column.
        Used by the search to take back a move it just made.
        """
        c = int(col)
        if c < 0 or c >= COLS:
            raise ValueError("Column out of range.")
        for r in range(ROWS):
            if self.grid[r][c] != Cell.EMPTY:
                self.grid[r][c] = Cell.EMPTY
                return
        raise ValueError("Cannot undo: column is empty.")

    def has_line_of_four(self, side: Cell) -> bool:
        return rules.has_line_of_four(self, side)

    def render(self) -> str:
        return "\n".join(" ".join(GLYPHS[cell] for cell in row) for row in self.grid)


def new_board() -> Board:
    return Board()
