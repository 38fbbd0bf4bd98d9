from __future__ import annotations
from typing import Callable, Optional

from general_search.search.general import GeneralSearcher, GFunction, Observer
from general_search.search.problem import Problem
from general_search.search.result import SearchResult


def a_star_search(
    problem: Problem,
    heuristic: Callable,
    tie_break: str = "fifo",
    g_function: Optional[GFunction] = None,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """A* with a fresh GeneralSearcher. heuristic: callable(state) -> estimate."""
    return GeneralSearcher(tie_break=tie_break).search(problem, heuristic, g_function, observer)


def uniform_cost_search(
    problem: Problem,
    tie_break: str = "fifo",
    g_function: Optional[GFunction] = None,
    observer: Optional[Observer] = None,
) -> SearchResult:
    return a_star_search(problem, lambda s: 0, tie_break, g_function, observer)
