from __future__ import annotations
from typing import Callable, Dict, Generic, Hashable, Optional, Type, TypeVar
from time import perf_counter
import itertools
import logging

from general_search.search.errors import ConfigurationError
from general_search.search.node import ExpandResult, Node, OperationResult
from general_search.search.priority_queue import PriorityQueue
from general_search.search.problem import Problem
from general_search.search.result import SearchResult

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
N = TypeVar("N", bound=Node)
C = TypeVar("C", int, float)

Heuristic = Callable[[S], C]
GFunction = Callable[[Node, OperationResult], C]
Observer = Callable[[Node, int, int], None]

TIE_BREAKS = ("fifo", "h", "g", "lifo")


def additive_cost(parent: Node, op: OperationResult):
    """g(child) = g(parent) + step cost."""
    return parent.g + op.cost


def depth_cost(parent: Node, op: OperationResult) -> int:
    """g(child) = depth(child); every move costs 1 whatever the operator says."""
    return parent.depth + 1


class GeneralSearcher(Generic[S, N, C]):
    """
    Generalized A* over any Problem.

    node_factory: node class exposing root(state) and child(state, g, operator);
                  defaults to Node.
    tie_break:    order among entries with equal f.
                  'fifo' earlier insertion first, 'h' lower h first,
                  'g' deeper (higher g) first, 'lifo' later insertion first.

    The searcher keeps no state between calls.
    """
    def __init__(self, node_factory: Type[N] = Node, tie_break: str = "fifo"):
        if tie_break not in TIE_BREAKS:
            raise ConfigurationError(f"unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}")
        self.node_factory = node_factory
        self.tie_break = tie_break

    def _priority(self, f, g, h, ctr: int):
        if self.tie_break == "h":    return (f, h)
        if self.tie_break == "g":    return (f, -g)
        if self.tie_break == "lifo": return (f, -ctr)
        return f

    def expand(self, problem: Problem[S, C], node: N, g_function: GFunction = additive_cost) -> ExpandResult:
        """Apply every operator of node.state; failed operations produce no child."""
        children = []
        for op in problem.operators(node.state):
            res = op.apply(node.state)
            if not res.succeeded:
                continue
            children.append(node.child(res.state, g_function(node, res), op.name))
        return ExpandResult(node, tuple(children))

    def search(
        self,
        problem: Problem[S, C],
        heuristic: Heuristic,
        g_function: Optional[GFunction] = None,
        observer: Optional[Observer] = None,
    ) -> SearchResult[S]:
        """
        Run A* from problem.initial_state.

        heuristic:  callable(state) -> estimate of the remaining cost.
        g_function: callable(parent_node, operation_result) -> child g;
                    defaults to additive_cost.
        observer:   callable(node, nodes_expanded, queue_size), invoked after
                    each expansion once the children are queued.

        With an admissible and consistent heuristic the returned node has
        minimal g. Exhausting the open set returns a result without a final node.
        """
        g_of = g_function or additive_cost
        t0 = perf_counter()
        counter = itertools.count()

        root = self.node_factory.root(problem.initial_state)
        h0 = heuristic(root.state)
        open_set: PriorityQueue[N] = PriorityQueue()
        open_set.insert(root, self._priority(root.g + h0, root.g, h0, next(counter)))

        best_g: Dict[S, C] = {root.state: root.g}
        expanded = 0
        generated = 0
        duplicates = 0
        stale = 0
        max_queue = 1
        logger.debug("search start: h0=%s tie_break=%s", h0, self.tie_break)

        while not open_set.is_empty():
            node = open_set.extract_min()
            # a cheaper path to this state was queued after this entry
            if node.g > best_g[node.state]:
                stale += 1
                continue

            if problem.goal_test(node.state):
                result = SearchResult(node, expanded, max_queue, generated, duplicates, stale,
                                      perf_counter() - t0)
                logger.debug("search solved: g=%s depth=%d expanded=%d max_queue=%d",
                             node.g, node.depth, expanded, max_queue)
                return result

            expanded += 1
            for child in self.expand(problem, node, g_of).result:
                generated += 1
                prev = best_g.get(child.state)
                if prev is not None:
                    duplicates += 1
                    if child.g >= prev:
                        continue
                best_g[child.state] = child.g
                h = heuristic(child.state)
                open_set.insert(child, self._priority(child.g + h, child.g, h, next(counter)))

            max_queue = max(max_queue, len(open_set))
            if observer is not None:
                observer(node, expanded, len(open_set))

        logger.debug("search exhausted: expanded=%d max_queue=%d", expanded, max_queue)
        return SearchResult(None, expanded, max_queue, generated, duplicates, stale,
                            perf_counter() - t0)
