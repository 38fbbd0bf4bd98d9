from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from general_search.domains.npuzzle import NPuzzle

State = Tuple[int, ...]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")


def add_domain_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")
    ap.add_argument("--rows", type=int, default=None, help="Rows for rectangular board")
    ap.add_argument("--cols", type=int, default=None, help="Cols for rectangular board")


def choose_domain(args) -> NPuzzle:
    """
    Domain selection precedence:
    --rows/--cols  >  --n  >  --domain (p8|p15).
    """
    if args.rows is not None and args.cols is not None:
        return NPuzzle(args.rows, args.cols)
    if args.n is not None:
        return NPuzzle(args.n)
    if args.domain == "p15":
        return NPuzzle(4)
    return NPuzzle(3)


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


def generate_instances(inst_scramble: Callable[[int, int], State],
                       inst_is_solvable: Callable[[State], bool],
                       depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = inst_scramble(d, seed)
            if inst_is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping the permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def friendly_time(seconds: float) -> str:
    """Elapsed time in μs below a millisecond, ms below a second, else seconds."""
    us = int(seconds * 1_000_000)
    if us < 1000:
        return f"{us} μs"
    if us < 1_000_000:
        return f"{us // 1000} ms"
    return f"{seconds:.3f} s"
