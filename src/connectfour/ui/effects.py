from __future__ import annotations
import sys
import time

from connectfour import config
from connectfour.ui.colors import side_tag


def thinking_label(agent, side) -> str:
    """'Minimax AI (x, depth 4, alpha-beta)' from whatever knobs the agent exposes."""
    bits = [side_tag(side)]
    depth = getattr(agent, "max_depth", None)
    if depth is not None:
        bits.append(f"depth {depth}")
    pruning = getattr(agent, "pruning", None)
    if pruning is not None:
        bits.append("alpha-beta" if pruning else "full tree")
    return f"{getattr(agent, 'name', 'Bot')} ({', '.join(bits)}) is thinking"


def ai_thinking(agent, side) -> None:
    """
    Pause before a bot move so it isn't instant, with a spinner unless disabled.
    """
    delay = config.AI_THINK_DELAY_SEC
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    label = thinking_label(agent, side)
    frames = "|/-\\"
    deadline = time.monotonic() + delay
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r\033[K")
    sys.stdout.flush()
