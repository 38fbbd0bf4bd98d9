#!/usr/bin/env python3
from __future__ import annotations
import argparse, sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from general_search.experiments.common import add_common_args, configure_logging

NUMERIC = ("depth", "seed", "solvable", "solved", "g", "expanded", "generated",
           "duplicates", "max_queue", "time_sec")


def effective_branching_factor(n_generated: float, depth: float) -> float:
    """b* such that N = b + b^2 + ... + b^d (AIMA 3.6.1). NaN when undefined."""
    if depth is None or n_generated is None or np.isnan(depth) or np.isnan(n_generated):
        return float("nan")
    if depth < 1 or n_generated <= 0:
        return float("nan")
    d = int(depth)
    coeffs = [1.0] * d + [-float(n_generated)]
    roots = np.roots(coeffs)
    real = roots[np.isclose(roots.imag, 0.0, atol=1e-9)].real
    real = real[real > 0]
    return float(real.max()) if real.size else float("nan")


def load_results(paths: Sequence[Path]) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=list(NUMERIC) + ["heuristic"])
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per (heuristic, depth) statistics over solved, solvable runs."""
    ok = df[(df["solvable"] == 1) & (df["solved"] == 1)].copy()
    if ok.empty:
        return pd.DataFrame()
    ok["ebf"] = [effective_branching_factor(n, g) for n, g in zip(ok["generated"], ok["g"])]
    out = ok.groupby(["heuristic", "depth"]).agg(
        runs=("expanded", "size"),
        expanded_mean=("expanded", "mean"),
        expanded_median=("expanded", "median"),
        expanded_min=("expanded", "min"),
        expanded_max=("expanded", "max"),
        expanded_std=("expanded", "std"),
        max_queue_mean=("max_queue", "mean"),
        g_mean=("g", "mean"),
        ebf_mean=("ebf", "mean"),
        time_mean=("time_sec", "mean"),
    )
    return out.fillna({"expanded_std": 0.0})


def compare(df: pd.DataFrame, base: str, other: str, metric: str = "expanded") -> pd.DataFrame:
    """Mean metric per depth for two heuristics and their ratio other/base."""
    ok = df[(df["solvable"] == 1) & (df["solved"] == 1)]
    means = ok.pivot_table(index="depth", columns="heuristic", values=metric, aggfunc="mean")
    if base not in means.columns or other not in means.columns:
        return pd.DataFrame()
    out = means[[base, other]].copy()
    out["ratio"] = out[other] / out[base].replace(0, np.nan)
    return out


def unsolvable_summary(df: pd.DataFrame) -> pd.DataFrame:
    bad = df[df["solvable"] == 0]
    if bad.empty:
        return pd.DataFrame()
    return bad.groupby("heuristic").agg(
        runs=("expanded", "size"),
        solved=("solved", "sum"),
        expanded_mean=("expanded", "mean"),
        max_queue_mean=("max_queue", "mean"),
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--base", default="misplaced", help="Reference heuristic for the ratio table")
    ap.add_argument("--other", default="manhattan", help="Heuristic compared against --base")
    ap.add_argument("--out", type=Path, default=None, help="Also write the summary table as CSV")
    add_common_args(ap)
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return 0

    summary = summarize(df)
    with pd.option_context("display.width", 160, "display.max_columns", 20):
        print("=" * 80)
        print("A* statistics per heuristic and scramble depth")
        print("=" * 80)
        print(summary.round(3).to_string() if not summary.empty else "(no solved runs)")

        cmp = compare(df, args.base, args.other)
        if not cmp.empty:
            print()
            print(f"Mean expansions: {args.other} vs {args.base}")
            print("-" * 60)
            print(cmp.round(3).to_string())

        bad = unsolvable_summary(df)
        if not bad.empty:
            print()
            print("Unsolvable variants")
            print("-" * 60)
            print(bad.round(3).to_string())

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
