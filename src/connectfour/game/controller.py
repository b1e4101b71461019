from __future__ import annotations

import logging
from typing import Callable

from connectfour.ai.base import Agent
from connectfour.core.board import new_board
from connectfour.game.results import GameOutcome, terminal_outcome
from connectfour.game.state import GameState
from connectfour.types import Cell, other
from connectfour.ui.effects import ai_thinking
from connectfour.ui.human import HumanAgent
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import render

logger = logging.getLogger(__name__)

_SIDE_LABEL = {Cell.HUMAN: "o", Cell.BOT: "x"}


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_o: Agent, agent_x: Agent, current: Cell) -> str:
    """
    Prepend a persistent header showing who plays o and x.
    """
    o_name = _agent_name(agent_o, "Player o")
    x_name = _agent_name(agent_x, "Player x")

    header = f"o: {o_name} | x: {x_name} | Turn: {_SIDE_LABEL[current]}"
    if status:
        return f"{header}\n{status}"
    return header


def _search_status(agent: Agent) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return ""
    return (
        f"{agent.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    human: Agent,
    bot: Agent,
    *,
    first: Cell = Cell.HUMAN,
    show_thinking: bool = True,
    read: Callable[[str], str] = input,
) -> GameOutcome:
    """
    Console game loop: `human` plays o (Cell.HUMAN), `bot` plays x (Cell.BOT).
    Either seat may hold a HumanAgent; those moves are read with `read`.
    """
    starter = "You start." if first == Cell.HUMAN else "Bot starts."
    state = GameState(board=new_board(), current=first, last_status=starter)
    agents = {Cell.HUMAN: human, Cell.BOT: bot}
    plies = 0

    while True:
        outcome = terminal_outcome(state.board, plies)
        if outcome is not None:
            render(
                state.board,
                _status_with_agents(outcome.describe(), human, bot, state.current),
                highlight=outcome.line,
            )
            logger.info("Game over: %s", outcome)
            return outcome

        render(state.board, _status_with_agents(state.last_status, human, bot, state.current))

        current_agent = agents[state.current]

        if isinstance(current_agent, HumanAgent):
            raw = read(f"Player {_SIDE_LABEL[state.current]} move: ")
            try:
                move = parse_move(raw, state.board.legal_moves(), state.board.cols)
            except ValueError as e:
                state.last_status = str(e)
                continue

            if move is None:
                outcome = GameOutcome(winner=None, reason="quit", plies=plies)
                render(state.board, _status_with_agents(outcome.describe(), human, bot, state.current))
                return outcome

            status = f"{current_agent.name} chose {int(move) + 1}"
        else:
            if show_thinking:
                ai_thinking(current_agent, state.current)

            move = current_agent.choose_move(state)
            status = _search_status(current_agent) or f"{current_agent.name} chose {int(move) + 1}"

        state.board.apply_move(move, state.current)
        plies += 1
        logger.debug("ply %d: %s -> col %d", plies, state.current.name, int(move) + 1)

        state.current = other(state.current)
        state.last_status = f"{status} | Next: Player {_SIDE_LABEL[state.current]}"
