from __future__ import annotations

import argparse
import logging
import random
import time

from connectfour import config
from connectfour.ai.minimax_agent import MinimaxAgent
from connectfour.game.controller import run_game
from connectfour.types import Cell
from connectfour.ui.human import HumanAgent


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect 4 against a minimax bot.")
    ap.add_argument("--depth", type=int, default=config.SEARCH_DEPTH, help="Search depth in plies after the bot's move")
    ap.add_argument("--reward", type=int, default=config.WIN_REWARD, help="Score of a win inside the horizon")
    ap.add_argument("--no-pruning", action="store_true", help="Disable alpha-beta pruning (same moves, more nodes)")
    ap.add_argument("--tie-break", choices=["random", "first"], default="random", help="How to pick among equally scored columns")
    ap.add_argument("--seed", type=int, default=None, help="Seed for random tie-breaks")
    ap.add_argument("--workers", type=int, default=1, help="Processes used to score the bot's candidate moves")
    ap.add_argument("--bot-first", action="store_true", help="Let the bot make the first move")

    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--no-delay", action="store_true", help="Skip the bot 'thinking' pause")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows per-move search scores)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    bot = MinimaxAgent(
        name="Minimax Bot",
        max_depth=args.depth,
        reward=args.reward,
        pruning=not args.no_pruning,
        tie_break=args.tie_break,
        workers=args.workers,
        rng=random.Random(args.seed),
    )
    human = HumanAgent()

    first = Cell.BOT if args.bot_first else Cell.HUMAN
    print(f"\nStarting game: {human.name} (o) vs {bot.name} (x)")
    if not args.no_delay:
        time.sleep(1)

    run_game(human, bot, first=first, show_thinking=not args.no_delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
