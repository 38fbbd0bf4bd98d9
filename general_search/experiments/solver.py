from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

from general_search.domains.npuzzle import NPuzzle, NPuzzleProblem, infer_dim
from general_search.heuristics.select import canonical_name, choose_heuristic
from general_search.search.general import GeneralSearcher, depth_cost
from general_search.search.node import Node
from general_search.search.result import SearchResult

logger = logging.getLogger(__name__)

State = Tuple[int, ...]


class NPuzzleSolver:
    """
    Solves square N-puzzle boards with A*, g(n) = depth.

    Keeps the last result so the caller can read the solution path and the
    statistics after solve() returns.
    """
    def __init__(self, heuristic: str = "manhattan", tie_break: str = "fifo"):
        self.heuristic_name = canonical_name(heuristic)
        self.searcher = GeneralSearcher(tie_break=tie_break)
        self.puzzle: Optional[NPuzzle] = None
        self.last_result: Optional[SearchResult] = None

    @staticmethod
    def g_func(node: Node) -> int:
        return node.depth

    def heuristic_function(self):
        if self.puzzle is None:
            raise RuntimeError("solve() has not been called yet")
        return choose_heuristic(self.heuristic_name, self.puzzle)

    def solve(self, initial: Sequence[int], goal: Optional[Sequence[int]] = None) -> SearchResult:
        n = infer_dim(initial)
        self.puzzle = NPuzzle(n, goal=goal)
        problem = NPuzzleProblem(self.puzzle, initial)
        logger.info("solving %s with %s", self.puzzle, self.heuristic_name)
        self.last_result = self.searcher.search(problem, self.heuristic_function(), depth_cost)
        return self.last_result

    def solution_path(self) -> List[Node]:
        """Nodes from the initial board to the goal; empty if the last search failed."""
        if self.last_result is None:
            return []
        return self.last_result.path()

    @property
    def total_nodes_expanded(self) -> int:
        return 0 if self.last_result is None else self.last_result.nodes_expanded

    @property
    def max_queue_length(self) -> int:
        return 0 if self.last_result is None else self.last_result.max_queue_length

    @property
    def elapsed(self) -> float:
        return 0.0 if self.last_result is None else self.last_result.elapsed
