import math
import os

import pandas as pd
import pytest

from connectfour_analysis.__main__ import main as analysis_main
from connectfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connectfour_analysis.metrics.summarize import SummaryConfig, per_agent_table, pruning_savings
from connectfour_analysis.plots import plot_nodes_by_depth, plot_win_rates


def _row(name, outcome, *, depth, pruning, moves=10, nodes=100, time_ms=20):
    return {
        "name": name, "opponent": "Random", "seat": "o", "outcome": outcome, "plies": 20,
        "moves": moves, "nodes": nodes, "cutoffs": 0, "time_ms": time_ms,
        "depth": depth, "pruning": pruning, "seed": 1,
    }


@pytest.fixture
def results_df():
    return pd.DataFrame([
        _row("Minimax d2", "win", depth=2, pruning=True, nodes=100),
        _row("Minimax d2", "win", depth=2, pruning=True, nodes=100),
        _row("Minimax d2 noprune", "win", depth=2, pruning=False, nodes=300),
        _row("Minimax d2 noprune", "draw", depth=2, pruning=False, nodes=300),
        _row("Random", "loss", depth=0, pruning=True, nodes=0, time_ms=0),
        _row("Random", "win", depth=0, pruning=True, nodes=0, time_ms=0),
    ])


@pytest.fixture
def results_csv(tmp_path, results_df):
    path = tmp_path / "benchmark_20260101_000000.csv"
    results_df.to_csv(path, index=False)
    return path


def test_per_agent_table(results_df):
    table = per_agent_table(results_df)
    assert list(table["name"]) == ["Minimax d2", "Minimax d2 noprune", "Random"]
    assert list(table["rk"]) == [1, 2, 3]

    top = table.iloc[0]
    assert top["games"] == 2 and top["wins"] == 2 and top["losses"] == 0
    assert top["win_rate"] == 1.0
    assert top["nodes_per_move"] == 10.0

    second = table.iloc[1]
    assert second["draws"] == 1
    assert second["win_rate"] == 0.5


def test_per_agent_table_filters(results_df):
    table = per_agent_table(results_df, SummaryConfig(top_n=1, min_games=2))
    assert list(table["name"]) == ["Minimax d2"]


def test_pruning_savings(results_df):
    savings = pruning_savings(results_df)
    assert list(savings.columns) == ["depth", "pruned", "unpruned", "ratio"]
    assert len(savings) == 1
    row = savings.iloc[0]
    assert row["pruned"] == 10.0
    assert row["unpruned"] == 30.0
    assert row["ratio"] == 3.0


def test_pruning_savings_with_one_setting(results_df):
    only_pruned = results_df[results_df["pruning"] == True]  # noqa: E712
    savings = pruning_savings(only_pruned)
    assert math.isnan(savings.iloc[0]["ratio"])


def test_missing_columns_are_reported(results_df):
    with pytest.raises(ValueError, match="Missing required columns"):
        pruning_savings(results_df.drop(columns=["pruning"]))


def test_load_results_coerces_types(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    assert pd.api.types.is_bool_dtype(df["pruning"])
    assert pd.api.types.is_numeric_dtype(df["nodes"])
    assert len(df) == 6


def test_load_results_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))

    bad = tmp_path / "bad.csv"
    pd.DataFrame({"agent": ["x"]}).to_csv(bad, index=False)
    with pytest.raises(ValueError, match="name"):
        load_results(LoadSpec(csv_path=bad))


def test_load_latest_from_dir(tmp_path, results_df):
    for stamp in ["20260101_000000", "20260301_120000", "20260201_000000"]:
        results_df.to_csv(tmp_path / f"benchmark_{stamp}.csv", index=False)
    assert load_latest_from_dir(tmp_path).name == "benchmark_20260301_120000.csv"

    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "missing")


def test_plots_are_saved(tmp_path, results_df):
    table = per_agent_table(results_df)
    savings = pruning_savings(results_df)

    bar = plot_win_rates(table, tmp_path, show=False)
    line = plot_nodes_by_depth(savings, tmp_path, show=False)

    assert bar is not None and bar.exists()
    assert line is not None and line.exists()
    assert plot_nodes_by_depth(savings.iloc[0:0], tmp_path, show=False) is None


def test_cli_prints_tables(results_csv, tmp_path, capsys):
    outdir = tmp_path / "figs"
    rc = analysis_main(["--csv", str(results_csv), "--outdir", str(outdir)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "=== Agents ===" in out
    assert "Alpha-beta savings" in out
    assert sorted(os.listdir(outdir)) == ["nodes_by_depth.png", "win_rates.png"]


def test_cli_unknown_command(capsys):
    assert analysis_main(["bogus"]) == 2
    assert "Usage" in capsys.readouterr().out
