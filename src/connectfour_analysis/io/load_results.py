
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


DEFAULT_EXPECTED_COLS = [
    "name", "opponent", "seat", "outcome", "plies",
    "moves", "nodes", "cutoffs", "time_ms",
    "depth", "pruning", "seed",
]

NUMERIC_COLS = ["plies", "moves", "nodes", "cutoffs", "time_ms", "depth", "seed"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def _coerce_bool(series: pd.Series) -> pd.Series:
    if pd.api.types.is_bool_dtype(series):
        return series
    return series.astype(str).str.strip().str.lower().map({"true": True, "false": False, "1": True, "0": False})


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    for required in ("name", "outcome"):
        if required not in df.columns:
            raise ValueError(f"CSV missing required column {required!r}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)
    if "pruning" in df.columns:
        df["pruning"] = _coerce_bool(df["pruning"])

    df["name"] = df["name"].astype(str)
    df["outcome"] = df["outcome"].astype(str).str.strip().str.lower()
    df = df[df["name"].str.len() > 0].copy()

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "benchmark_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
