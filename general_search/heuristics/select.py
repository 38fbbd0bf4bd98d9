from __future__ import annotations
from typing import Callable, Dict, Tuple

from general_search.search.errors import ConfigurationError

State = Tuple[int, ...]

HEURISTICS = ("uniform", "misplaced", "manhattan", "linear_conflict")

_ALIASES: Dict[str, str] = {
    "uniform": "uniform", "ucs": "uniform", "zero": "uniform",
    "misplaced": "misplaced", "misplaced_tiles": "misplaced", "mt": "misplaced",
    "manhattan": "manhattan", "m": "manhattan",
    "linear_conflict": "linear_conflict", "linear": "linear_conflict", "lc": "linear_conflict",
}

def canonical_name(name: str) -> str:
    try:
        return _ALIASES[name.lower()]
    except KeyError:
        raise ConfigurationError(f"unknown heuristic {name!r}; expected one of {HEURISTICS}") from None

def choose_heuristic(name: str, puzzle) -> Callable[[State], int]:
    """Bind a heuristic of the given name to an NPuzzle instance."""
    n = canonical_name(name)
    if n == "uniform":
        return puzzle.uniform
    if n == "misplaced":
        return puzzle.misplaced_tiles
    if n == "manhattan":
        return puzzle.manhattan
    return puzzle.linear_conflict
