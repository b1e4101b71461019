from __future__ import annotations
from typing import Optional, Sequence

from connectfour.config import COLS
from connectfour.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, legal: Sequence[Move], cols: int = COLS) -> Optional[Move]:
    """
    1-based column text to a 0-based Move that is in `legal`.
    None means the player quit; anything else unusable raises ValueError
    with the message the driver shows before prompting again.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    if col not in legal:
        raise ValueError(f"Column {col + 1} is full.")
    return Move(col)
