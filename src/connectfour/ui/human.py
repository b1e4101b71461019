from __future__ import annotations

from connectfour.types import Move
from connectfour.game.state import GameState


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent moves come from the prompt, not choose_move.")
