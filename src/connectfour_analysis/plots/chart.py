from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_win_rates(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if table.empty or "name" not in table.columns or "win_rate" not in table.columns:
        return None

    fig = plt.figure(figsize=(10, 5))
    plt.bar(table["name"].astype(str), table["win_rate"].astype(float))
    plt.title("Win rate vs random baseline")
    plt.xlabel("agent")
    plt.ylabel("win rate")
    plt.ylim(0, 1)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, "win_rates.png", show=show)


def plot_nodes_by_depth(savings: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """
    Nodes per move against search depth, one line per pruning setting.
    Log scale: the unpruned tree grows roughly 7x per ply.
    """
    if savings.empty:
        return None

    fig = plt.figure()
    for col, label in (("pruned", "alpha-beta"), ("unpruned", "plain minimax")):
        series = savings[["depth", col]].dropna()
        if not series.empty:
            plt.plot(series["depth"], series[col], marker="o", label=label)
    plt.yscale("log")
    plt.title("Search effort by depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes per move")
    plt.legend()

    return _finish(fig, outdir, "nodes_by_depth.png", show=show)
