import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from connectfour import config
from connectfour.core.board import Board

# Full board, no four in a row anywhere: rows alternate between two patterns.
DRAW_ROWS = [
    "o o x x o o x",
    "x x o o x x o",
    "o o x x o o x",
    "x x o o x x o",
    "o o x x o o x",
    "x x o o x x o",
]


@pytest.fixture
def board_from():
    def build(*lines: str) -> Board:
        # pad with empty rows on top so tests only draw the interesting part
        padded = ["." * 7] * (6 - len(lines)) + list(lines)
        return Board.from_rows(padded)

    return build


@pytest.fixture
def quiet_ui(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)
