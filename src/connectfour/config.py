# src/connectfour/config.py

from __future__ import annotations

import os

from connectfour.types import Cell

ROWS = 6
COLS = 7
CONNECT_N = 4

# Board.render() glyphs
GLYPHS = {
    Cell.EMPTY: ".",
    Cell.HUMAN: "o",
    Cell.BOT: "x",
}

# UI toggles (main.py flips these from the command line)
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # short pause so bot moves aren’t instant

# Search defaults
SEARCH_DEPTH = 4
WIN_REWARD = 100
