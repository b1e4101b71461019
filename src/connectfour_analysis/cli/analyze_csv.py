from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, per_agent_table, pruning_savings
from ..plots.chart import plot_nodes_by_depth, plot_win_rates


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-analysis", description="Analyze Connect-4 benchmark CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing benchmark_*.csv")
    ap.add_argument("--pattern", type=str, default="benchmark_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="data/figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N rows of the agent table")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}  Agents: {df['name'].nunique()}")

    cfg = SummaryConfig(top_n=args.top, min_games=args.min_games)

    table = per_agent_table(df, cfg)
    print("\n=== Agents ===")
    print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    savings = pruning_savings(df)
    if not savings.empty:
        print("\n=== Alpha-beta savings (nodes per move) ===")
        print(savings.to_string(index=False, float_format=lambda v: f"{v:.1f}"))

    if args.no_plots:
        return 0

    saved = [
        plot_win_rates(table, outdir, show=args.show),
        plot_nodes_by_depth(savings, outdir, show=args.show),
    ]
    if not args.show and any(saved):
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
