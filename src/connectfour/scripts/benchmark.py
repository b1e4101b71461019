from __future__ import annotations

import argparse
import csv
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from connectfour.scripts.bench_play import CSV_COLUMNS, Entry, chunked, run_batch
from connectfour.ui.colors import BOLD, DIM, c

logger = logging.getLogger(__name__)

RANDOM = Entry(name="Random", kind="random")


def build_roster(depths: Sequence[int], no_pruning_depths: Sequence[int]) -> List[Entry]:
    roster = [RANDOM]
    for d in depths:
        roster.append(Entry(name=f"Minimax d{d}", kind="minimax", depth=d, pruning=True))
    for d in no_pruning_depths:
        roster.append(Entry(name=f"Minimax d{d} noprune", kind="minimax", depth=d, pruning=False))
    return roster


def run_benchmark(
    roster: Sequence[Entry],
    *,
    games: int = 20,
    seed: int = 1234,
    opening_plies: int = 2,
    max_workers: Optional[int] = 1,
    batch_games: int = 5,
) -> List[dict]:
    """Every roster entry plays `games` games against the random baseline."""
    tasks = []
    for idx, entry in enumerate(roster, start=1):
        base_seed = seed + idx * 10_000
        for game_ids in chunked(list(range(games)), batch_games):
            tasks.append((entry, RANDOM, game_ids, base_seed, opening_plies))

    rows: List[dict] = []
    if max_workers == 1:
        for t in tasks:
            rows.extend(run_batch(t))
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(run_batch, t) for t in tasks]
            for fut in as_completed(futures):
                rows.extend(fut.result())

    order = {e.name: i for i, e in enumerate(roster)}
    rows.sort(key=lambda r: (order[r["name"]], r["seed"]))
    return rows


def write_csv(rows: Sequence[dict], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"benchmark_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        for row in rows:
            w.writerow(row)

    return out_path


def print_summary(rows: Sequence[dict]) -> None:
    agg: Dict[str, Dict[str, int]] = {}
    for r in rows:
        a = agg.setdefault(r["name"], {"games": 0, "win": 0, "draw": 0, "loss": 0, "moves": 0, "nodes": 0, "time_ms": 0})
        a["games"] += 1
        a[r["outcome"]] += 1
        a["moves"] += r["moves"]
        a["nodes"] += r["nodes"]
        a["time_ms"] += r["time_ms"]

    print(c(f"{'agent':<24}{'W-D-L':>12}{'nodes/move':>14}{'ms/move':>10}", BOLD))
    print(c("─" * 60, DIM))
    for name, a in agg.items():
        moves = a["moves"] or 1
        wdl = f"{a['win']}-{a['draw']}-{a['loss']}"
        print(f"{name:<24}{wdl:>12}{a['nodes'] / moves:>14.1f}{a['time_ms'] / moves:>10.1f}")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-benchmark", description="Play minimax configurations against a random baseline.")
    ap.add_argument("--games", type=int, default=20, help="Games per roster entry (seats alternate)")
    ap.add_argument("--depths", type=int, nargs="*", default=[1, 2, 3, 4], help="Depths searched with pruning")
    ap.add_argument("--no-pruning-depths", type=int, nargs="*", default=[1, 2, 3], help="Depths searched without pruning")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed")
    ap.add_argument("--opening-plies", type=int, default=2, help="Random moves played before the agents take over")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes (default: cpu count, 1 = inline)")
    ap.add_argument("--batch-games", type=int, default=5, help="Games per worker task")
    ap.add_argument("--out-dir", type=str, default="data/results", help="Where benchmark_*.csv is written")
    ap.add_argument("--log-level", default="WARNING")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    roster = build_roster(args.depths, args.no_pruning_depths)
    print(c(f"Roster size: {len(roster)} entries, {args.games} games each vs {RANDOM.name}", BOLD))

    start = time.perf_counter()
    rows = run_benchmark(
        roster,
        games=args.games,
        seed=args.seed,
        opening_plies=args.opening_plies,
        max_workers=args.workers,
        batch_games=args.batch_games,
    )
    elapsed = time.perf_counter() - start
    logger.info("benchmark finished: %d games in %.1fs", len(rows), elapsed)

    print_summary(rows)
    out_path = write_csv(rows, Path(args.out_dir))
    print(f"\nWrote CSV: {out_path}  ({elapsed:.1f}s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
