from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Literal, Sequence, Tuple

from connectfour.ai.minimax_agent import MinimaxAgent
from connectfour.ai.random_agent import RandomAgent
from connectfour.core.board import new_board
from connectfour.game.results import GameOutcome, terminal_outcome
from connectfour.game.state import GameState
from connectfour.types import Cell, other

CSV_COLUMNS = [
    "name", "opponent", "seat", "outcome", "plies",
    "moves", "nodes", "cutoffs", "time_ms",
    "depth", "pruning", "seed",
]

SEAT_LABEL = {Cell.HUMAN: "o", Cell.BOT: "x"}


@dataclass(frozen=True)
class Entry:
    name: str
    kind: Literal["minimax", "random"]
    depth: int = 0
    pruning: bool = True

    def make(self, side: Cell, seed: int):
        if self.kind == "random":
            return RandomAgent(name=self.name, seed=seed)
        return MinimaxAgent(
            name=self.name,
            max_depth=self.depth,
            pruning=self.pruning,
            side=side,
            rng=random.Random(seed),
        )


def play_headless(agent_o, agent_x, seed_base: int = 0, opening_plies: int = 2) -> Tuple[GameOutcome, Dict[Cell, Dict[str, int]]]:
    """
    Play one game without rendering. o (Cell.HUMAN) moves first.
    The first `opening_plies` moves are random so repeated pairings differ.
    """
    state = GameState(board=new_board(), current=Cell.HUMAN)
    agents = {Cell.HUMAN: agent_o, Cell.BOT: agent_x}
    stats = {side: {"moves": 0, "nodes": 0, "cutoffs": 0, "time_ms": 0} for side in agents}
    plies = 0

    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        moves = state.board.legal_moves()
        if not moves:
            break
        state.board.apply_move(rng.choice(moves), state.current)
        state.current = other(state.current)
        plies += 1

    while True:
        outcome = terminal_outcome(state.board, plies)
        if outcome is not None:
            return outcome, stats

        agent = agents[state.current]
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["cutoffs"] += int(info.get("cutoffs", 0))
        side_stats["time_ms"] += int(info.get("time_ms", 0))

        state.board.apply_move(move, state.current)
        state.current = other(state.current)
        plies += 1


def result_for(outcome: GameOutcome, seat: Cell) -> str:
    if outcome.winner is None:
        return "draw"
    return "win" if outcome.winner == seat else "loss"


def run_batch(args: Tuple[Entry, Entry, Sequence[int], int, int]) -> List[dict]:
    """Worker task: play games `game_ids` of `entry` against `opponent`, return CSV rows."""
    entry, opponent, game_ids, base_seed, opening_plies = args
    rows = []
    for g in game_ids:
        seed = base_seed + g
        seat = Cell.HUMAN if g % 2 == 0 else Cell.BOT
        me = entry.make(seat, seed + 101)
        them = opponent.make(other(seat), seed + 202)

        if seat == Cell.HUMAN:
            outcome, stats = play_headless(me, them, seed_base=seed, opening_plies=opening_plies)
        else:
            outcome, stats = play_headless(them, me, seed_base=seed, opening_plies=opening_plies)

        mine = stats[seat]
        rows.append({
            "name": entry.name,
            "opponent": opponent.name,
            "seat": SEAT_LABEL[seat],
            "outcome": result_for(outcome, seat),
            "plies": outcome.plies,
            "moves": mine["moves"],
            "nodes": mine["nodes"],
            "cutoffs": mine["cutoffs"],
            "time_ms": mine["time_ms"],
            "depth": entry.depth,
            "pruning": entry.pruning,
            "seed": seed,
        })
    return rows


def chunked(lst, size: int) -> Iterator[list]:
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
