from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def per_agent_table(df: pd.DataFrame, cfg: SummaryConfig | None = None) -> pd.DataFrame:
    """One row per agent: W-D-L, win rate and search effort per move."""
    cfg = cfg or SummaryConfig()
    _require_cols(df, ["name", "outcome", "moves", "nodes", "time_ms"])

    flagged = df.assign(
        win=(df["outcome"] == "win").astype(int),
        draw=(df["outcome"] == "draw").astype(int),
        loss=(df["outcome"] == "loss").astype(int),
    )
    out = (
        flagged.groupby("name", sort=False)
        .agg(
            games=("outcome", "size"),
            wins=("win", "sum"),
            draws=("draw", "sum"),
            losses=("loss", "sum"),
            moves=("moves", "sum"),
            nodes=("nodes", "sum"),
            time_ms=("time_ms", "sum"),
        )
        .reset_index()
    )

    moves = out["moves"].replace(0, float("nan"))
    out["win_rate"] = out["wins"] / out["games"]
    out["nodes_per_move"] = out["nodes"] / moves
    out["ms_per_move"] = out["time_ms"] / moves

    if cfg.min_games > 0:
        out = out[out["games"] >= cfg.min_games]

    out = out.sort_values(["win_rate", "name"], ascending=[False, True])
    out = out.head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def pruning_savings(df: pd.DataFrame) -> pd.DataFrame:
    """
    Nodes searched per move at each depth, with and without alpha-beta.
    `ratio` is unpruned / pruned; NaN when only one setting was benchmarked.
    """
    _require_cols(df, ["depth", "pruning", "moves", "nodes"])

    searched = df[df["depth"].fillna(0) > 0]
    if searched.empty:
        return pd.DataFrame(columns=["depth", "pruned", "unpruned", "ratio"])

    per = searched.groupby(["depth", "pruning"]).agg(nodes=("nodes", "sum"), moves=("moves", "sum")).reset_index()
    per["nodes_per_move"] = per["nodes"] / per["moves"].replace(0, float("nan"))

    wide = per.pivot(index="depth", columns="pruning", values="nodes_per_move")
    wide = wide.rename(columns={True: "pruned", False: "unpruned"}).reindex(columns=["pruned", "unpruned"])
    wide["ratio"] = wide["unpruned"] / wide["pruned"]
    wide.columns.name = None

    return wide.reset_index().sort_values("depth").reset_index(drop=True)
