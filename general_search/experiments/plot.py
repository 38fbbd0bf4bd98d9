#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List, Optional

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from general_search.experiments.analyze import load_results
from general_search.experiments.common import add_common_args, configure_logging

METRICS = ["expanded", "generated", "max_queue", "time_sec"]


def agg_mean(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    """heuristic, depth -> mean and population std of metric over solved runs."""
    ok = df[(df["solvable"] == 1) & (df["solved"] == 1)]
    return ok.groupby(["heuristic", "depth"])[metric].agg(mean="mean", std=lambda v: v.std(ddof=0)).reset_index()


def plot_metric(ax, df: pd.DataFrame, metric: str, log: bool = False):
    series = agg_mean(df, metric)
    for heur, grp in series.groupby("heuristic"):
        ax.errorbar(grp["depth"], grp["mean"], yerr=grp["std"].fillna(0.0),
                    marker="o", capsize=3, label=heur)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    if log:
        ax.set_yscale("log")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Logarithmic y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    add_common_args(ap)
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem

    # Combined figure
    fig, axes = plt.subplots(1, len(METRICS), figsize=(5 * len(METRICS), 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, df, metric, args.log)
    plt.tight_layout()
    save_fig(fig, args.save, f"{base}_combined")
    plt.close(fig)

    # Separate single-panel figures
    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric, args.log)
        plt.tight_layout()
        save_fig(fig, args.save, f"{base}_{metric}")
        if not args.show:
            plt.close(fig)

    if args.show:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
