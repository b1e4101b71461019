from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from math import inf
import logging
import random
import time
from typing import List, Optional, Tuple

from connectfour.config import SEARCH_DEPTH, WIN_REWARD
from connectfour.core.board import Board
from connectfour.game.state import GameState
from connectfour.types import Cell, Move, TieBreak, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Fixed-depth minimax with optional alpha-beta pruning.

    Leaves score 0 unless a placement completes four in a row, in which case
    it scores +reward for `side` and -reward for the opponent. There is no
    positional heuristic, so the agent only sees threats inside its horizon.

    `pruning=False, tie_break="first"` gives the plain deterministic minimax.
    """

    name: str = "Minimax AI"
    max_depth: int = SEARCH_DEPTH
    reward: int = WIN_REWARD
    pruning: bool = True
    tie_break: TieBreak = "random"
    side: Cell = Cell.BOT
    workers: int = 1
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0.")
        if self.tie_break not in ("random", "first"):
            raise ValueError(f"Unknown tie_break: {self.tie_break!r}")
        if self.side == Cell.EMPTY:
            raise ValueError("side must be HUMAN or BOT.")
        if self.workers < 1:
            raise ValueError("workers must be >= 1.")

    @property
    def opponent(self) -> Cell:
        return other(self.side)

    def choose_move(self, state: GameState) -> Move:
        # search for whoever is to move; the agent may sit in either seat
        if state.current == Cell.EMPTY:
            raise ValueError("No side to move.")
        if state.current != self.side:
            self.side = state.current
        move = self.recommend_move(state.board)
        if move is None:
            raise ValueError("No valid moves.")
        return move

    def recommend_move(self, board: Board) -> Optional[Move]:
        moves = board.legal_moves()
        if not moves:
            self.last_info = {}
            return None

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        if self.workers > 1 and len(moves) > 1:
            scored = self._score_parallel(board, moves)
        else:
            work = board.copy()
            scored = [(m, self.score_root_move(work, m)) for m in moves]

        best_score = max(s for (_, s) in scored)
        candidates = [m for (m, s) in scored if s == best_score]
        if self.tie_break == "first":
            best_move = candidates[0]
        else:
            best_move = self.rng.choice(candidates)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.max_depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": best_score,
            "move_col": int(best_move) + 1,
            "candidates": [int(m) + 1 for m in candidates],
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s scored %s -> col %d (nodes=%d cutoffs=%d)",
            self.name,
            {int(m) + 1: s for (m, s) in scored},
            int(best_move) + 1,
            self._nodes,
            self._cutoffs,
        )
        return best_move

    def score_root_move(self, work: Board, move: Move) -> int:
        """Score one root move on `work`, leaving `work` as it was."""
        if work.drop(move, self.side) is None:
            raise ValueError(f"Column {int(move) + 1} is not playable.")
        if work.has_line_of_four(self.side):
            score = self.reward
        else:
            score = self.evaluate(work, self.max_depth, -inf, inf, False)
        work.undo(move)
        return score

    def evaluate(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> int:
        self._nodes += 1

        moves = board.legal_moves()
        if not moves or depth == 0:
            return 0

        if maximizing:
            to_play, win_score = self.side, self.reward
        else:
            to_play, win_score = self.opponent, -self.reward

        best = -inf if maximizing else inf
        for m in moves:
            board.drop(m, to_play)
            if board.has_line_of_four(to_play):
                score = win_score
            else:
                score = self.evaluate(board, depth - 1, alpha, beta, not maximizing)
            board.undo(m)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if self.pruning and beta <= alpha:
                self._cutoffs += 1
                break

        return best

    def _score_parallel(self, board: Board, moves: List[Move]) -> List[Tuple[Move, int]]:
        params = (self.max_depth, self.reward, self.pruning, self.side)
        with ProcessPoolExecutor(max_workers=self.workers) as ex:
            futures = [ex.submit(_score_branch, board.copy(), m, params) for m in moves]
            results = [f.result() for f in futures]

        scored = []
        for m, (score, nodes, cutoffs) in zip(moves, results):
            self._nodes += nodes
            self._cutoffs += cutoffs
            scored.append((m, score))
        return scored


def _score_branch(board: Board, move: Move, params: tuple) -> Tuple[int, int, int]:
    max_depth, reward, pruning, side = params
    agent = MinimaxAgent(max_depth=max_depth, reward=reward, pruning=pruning, side=side)
    score = agent.score_root_move(board, move)
    return score, agent._nodes, agent._cutoffs
