from dataclasses import dataclass, field
from typing import List

import pytest

from connectfour.ai.minimax_agent import MinimaxAgent
from connectfour.game.controller import run_game
from connectfour.types import Cell, Move
from connectfour.ui.human import HumanAgent

# 1-based columns, o and x alternating; ends on the full DRAW_ROWS board.
DRAW_SEQUENCE = (
    ["3", "5", "5", "1", "1", "3"] * 3
    + ["4", "2", "2", "4"] * 3
    + ["7", "6", "6", "7"] * 3
)


def scripted(lines: List[str]):
    it = iter(lines)
    return lambda prompt: next(it)


@dataclass
class FixedAgent:
    columns: List[int]
    name: str = "Fixed"
    _i: int = field(default=0)

    def choose_move(self, state) -> Move:
        col = self.columns[self._i]
        self._i += 1
        return Move(col)


@pytest.mark.usefixtures("quiet_ui")
def test_quit_ends_the_game(capsys):
    outcome = run_game(HumanAgent(), MinimaxAgent(max_depth=1), show_thinking=False, read=scripted(["q"]))
    assert outcome.reason == "quit"
    assert outcome.plies == 0
    assert "Game quit." in capsys.readouterr().out


@pytest.mark.usefixtures("quiet_ui")
def test_bad_input_reprompts(capsys):
    outcome = run_game(HumanAgent(), HumanAgent(), show_thinking=False, read=scripted(["abc", "9", "q"]))
    out = capsys.readouterr().out
    assert outcome.reason == "quit"
    assert "Invalid input" in out
    assert "between 1 and 7" in out


@pytest.mark.usefixtures("quiet_ui")
def test_full_column_is_refused(capsys):
    lines = ["1"] * 7 + ["q"]
    outcome = run_game(HumanAgent(), HumanAgent(), show_thinking=False, read=scripted(lines))
    assert outcome.reason == "quit"
    assert outcome.plies == 6
    assert "Column 1 is full." in capsys.readouterr().out


@pytest.mark.usefixtures("quiet_ui")
def test_human_vertical_win():
    lines = ["1", "2", "1", "2", "1", "2", "1"]
    outcome = run_game(HumanAgent(), HumanAgent(), show_thinking=False, read=scripted(lines))
    assert outcome.reason == "win"
    assert outcome.winner == Cell.HUMAN
    assert outcome.plies == 7
    assert outcome.line == [(2, 0), (3, 0), (4, 0), (5, 0)]


@pytest.mark.usefixtures("quiet_ui")
def test_bot_can_move_first_and_win(capsys):
    bot = FixedAgent(columns=[5, 5, 5, 5])
    outcome = run_game(HumanAgent(), bot, first=Cell.BOT, show_thinking=False, read=scripted(["1", "2", "1"]))
    assert outcome.reason == "win"
    assert outcome.winner == Cell.BOT
    assert outcome.plies == 7
    assert "Bot wins!" in capsys.readouterr().out


@pytest.mark.usefixtures("quiet_ui")
def test_full_board_is_reported_as_draw(capsys):
    assert len(DRAW_SEQUENCE) == 42
    outcome = run_game(HumanAgent(), HumanAgent(), show_thinking=False, read=scripted(DRAW_SEQUENCE))
    assert outcome.reason == "draw"
    assert outcome.winner is None
    assert outcome.plies == 42
    assert "Draw game." in capsys.readouterr().out


@pytest.mark.usefixtures("quiet_ui")
def test_minimax_bot_blocks_in_a_live_game(capsys):
    bot = MinimaxAgent(max_depth=2, tie_break="first")
    # o stacks column 4; the bot must answer the third piece in column 4
    outcome = run_game(HumanAgent(), bot, show_thinking=False, read=scripted(["4", "4", "4", "q"]))
    assert outcome.reason == "quit"
    out = capsys.readouterr().out
    assert "Minimax AI chose 4" in out


@pytest.mark.usefixtures("quiet_ui")
def test_minimax_engine_can_hold_the_o_seat():
    engine = MinimaxAgent(max_depth=2, tie_break="first")
    # x keeps stacking column 2 and never blocks column 1
    outcome = run_game(engine, HumanAgent(), show_thinking=False, read=scripted(["2", "2", "2"]))
    assert outcome.reason == "win"
    assert outcome.winner == Cell.HUMAN
    assert outcome.plies == 7
    assert outcome.line == [(2, 0), (3, 0), (4, 0), (5, 0)]
    assert engine.side == Cell.HUMAN
