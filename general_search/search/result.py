from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from general_search.search.node import Node

S = TypeVar("S")


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """
    Outcome of one GeneralSearcher.search() call.

    final_node is None when the open set was exhausted without reaching a
    goal (an unsolvable instance, not an error).
    """
    final_node: Optional[Node]
    nodes_expanded: int
    max_queue_length: int
    nodes_generated: int = 0
    duplicates: int = 0
    stale_skipped: int = 0
    elapsed: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.final_node is not None

    @property
    def cost(self):
        return None if self.final_node is None else self.final_node.g

    @property
    def depth(self) -> Optional[int]:
        return None if self.final_node is None else self.final_node.depth

    def path(self) -> List[Node]:
        """Nodes from the initial state to the goal; empty on failure."""
        return [] if self.final_node is None else self.final_node.path()

    def states(self) -> List[S]:
        return [n.state for n in self.path()]

    def actions(self) -> List[str]:
        return [n.operator for n in self.path()[1:]]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "solved": int(self.succeeded),
            "g": self.cost,
            "depth": self.depth,
            "expanded": self.nodes_expanded,
            "generated": self.nodes_generated,
            "duplicates": self.duplicates,
            "stale_skipped": self.stale_skipped,
            "max_queue": self.max_queue_length,
            "time_sec": self.elapsed,
            "termination": "ok" if self.succeeded else "exhausted",
        }
