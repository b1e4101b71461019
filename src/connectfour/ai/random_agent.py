from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Optional

from connectfour.game.state import GameState
from connectfour.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    seed: Optional[int] = None
    rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.legal_moves()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
