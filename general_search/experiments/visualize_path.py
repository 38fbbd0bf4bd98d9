#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from general_search.domains.npuzzle import NPuzzleProblem, parse_board
from general_search.experiments.common import add_common_args, add_domain_args, choose_domain, configure_logging
from general_search.heuristics.select import HEURISTICS, choose_heuristic
from general_search.search.errors import ConfigurationError
from general_search.search.general import GeneralSearcher


def draw_board(state: Sequence[int], rows: int, cols: int, out_path: Path, title: str = ""):
    fig = plt.figure(figsize=(cols, rows))
    ax = fig.gca()
    ax.set_xlim(0, cols); ax.set_ylim(0, rows)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(rows + 1):
        ax.plot([0, cols], [i, i], linewidth=1, color="black")
    for i in range(cols + 1):
        ax.plot([i, i], [0, rows], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, cols)
        ax.text(c + 0.5, r + 0.55, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=9)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=list(HEURISTICS), default="manhattan")
    p.add_argument("--board", default=None, help="Explicit start board; otherwise a scramble is used")
    p.add_argument("--depth", type=int, default=10, help="Scramble depth")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("results/figs/example_path"))
    add_domain_args(p)
    add_common_args(p)
    args = p.parse_args(argv)
    configure_logging(args.log_level)

    try:
        dom = choose_domain(args)
        start = dom.validate(parse_board(args.board)) if args.board else dom.scramble(args.depth, args.seed)
        h = choose_heuristic(args.heuristic, dom)
        problem = NPuzzleProblem(dom, start)
    except ConfigurationError as e:
        p.error(str(e))

    res = GeneralSearcher().search(problem, h)
    if not res.succeeded:
        print("No path (exhausted).")
        return 1

    for i, node in enumerate(res.path()):
        title = f"step {i}: {node.operator or 'start'}  g={node.g} h={h(node.state)}"
        draw_board(node.state, dom.R, dom.C, args.outdir / f"step_{i:03d}.png", title)
    print(f"Saved {len(res.path())} frames to {args.outdir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
