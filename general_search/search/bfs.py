from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, Hashable, Optional

from general_search.search.node import Node
from general_search.search.problem import Problem
from general_search.search.result import SearchResult


def _successors(problem: Problem, state):
    for op in problem.operators(state):
        res = op.apply(state)
        if res.succeeded:
            yield op.name, res.state


def breadth_first_search(problem: Problem) -> SearchResult:
    """Fewest-moves search ignoring step costs; g counts moves."""
    t0 = perf_counter()
    root = Node.root(problem.initial_state)
    q = deque([root])
    seen = {root.state}
    expanded = generated = duplicates = 0
    peak = 1
    while q:
        node = q.popleft()
        if problem.goal_test(node.state):
            return SearchResult(node, expanded, peak, generated, duplicates, 0, perf_counter() - t0)
        expanded += 1
        for name, s2 in _successors(problem, node.state):
            generated += 1
            if s2 in seen:
                duplicates += 1
                continue
            seen.add(s2)
            q.append(node.child(s2, node.g + 1, name))
        peak = max(peak, len(q))
    return SearchResult(None, expanded, peak, generated, duplicates, 0, perf_counter() - t0)


def distances(problem: Problem, max_depth: Optional[int] = None) -> Dict[Hashable, int]:
    """
    Move count from problem.initial_state to every reachable state
    (within max_depth moves when given).
    """
    dist = {problem.initial_state: 0}
    q = deque([problem.initial_state])
    while q:
        s = q.popleft()
        d = dist[s]
        if max_depth is not None and d >= max_depth:
            continue
        for _, s2 in _successors(problem, s):
            if s2 not in dist:
                dist[s2] = d + 1
                q.append(s2)
    return dist
