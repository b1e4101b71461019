from __future__ import annotations
from connectfour import config
from connectfour.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

SIDE_COLORS = {
    Cell.EMPTY: FG_GRAY,
    Cell.HUMAN: FG_YELLOW,
    Cell.BOT: FG_RED,
}


def c(s: str, code: str) -> str:
    # read at call time so --no-color can switch it off after import
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def piece(cell: Cell, highlighted: bool = False) -> str:
    """Board glyph for `cell`; a winning-line cell is upper-cased and reversed."""
    glyph = config.GLYPHS[cell]
    if highlighted:
        return c(glyph.upper(), REVERSE + BOLD)
    return c(glyph, SIDE_COLORS[cell])


def side_tag(side: Cell) -> str:
    return c(config.GLYPHS[side], SIDE_COLORS[side] + BOLD)
