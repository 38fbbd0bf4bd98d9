from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, List, Optional, Tuple, TypeVar
import math

from general_search.search.errors import ConfigurationError

S = TypeVar("S", bound=Hashable)
C = TypeVar("C", int, float)


@dataclass(frozen=True)
class OperationResult(Generic[S, C]):
    """Outcome of applying one operator to a state: the new state and the step cost.

    Build with OperationResult.success(state, cost) or OperationResult.failure().
    """
    succeeded: bool
    state: Optional[S] = None
    cost: C = 0

    @classmethod
    def success(cls, state: S, cost: C) -> "OperationResult[S, C]":
        return cls(True, state, cost)

    @classmethod
    def failure(cls) -> "OperationResult[S, C]":
        return cls(False)


@dataclass(frozen=True)
class Operator(Generic[S, C]):
    """
    One named state transition with a non-negative step cost.
    transition: callable(state) -> next_state, or None when it does not apply.
    """
    name: str
    cost: C
    transition: Callable[[S], Optional[S]] = field(compare=False, repr=False)

    def __post_init__(self):
        if self.cost < 0 or (isinstance(self.cost, float) and math.isnan(self.cost)):
            raise ConfigurationError(f"operator {self.name!r} has invalid step cost {self.cost!r}")

    def apply(self, state: S) -> OperationResult[S, C]:
        s2 = self.transition(state)
        if s2 is None:
            return OperationResult.failure()
        return OperationResult.success(s2, self.cost)


@dataclass(frozen=True, eq=False)
class Node(Generic[S, C]):
    """
    A state plus the path that reached it.

    g is the accumulated cost from the root, parent the node this one was
    expanded from (None for the root), operator the name of the move that
    produced it. Two nodes compare equal when their states do.
    """
    state: S
    g: C = 0
    depth: int = 0
    parent: Optional["Node[S, C]"] = field(default=None, repr=False)
    operator: Optional[str] = None

    @classmethod
    def root(cls, state: S) -> "Node[S, C]":
        return cls(state=state)

    def child(self, state: S, g: C, operator: Optional[str] = None) -> "Node[S, C]":
        return type(self)(state=state, g=g, depth=self.depth + 1, parent=self, operator=operator)

    def path(self) -> List["Node[S, C]"]:
        """Nodes from the root down to this one."""
        out: List[Node[S, C]] = []
        node: Optional[Node[S, C]] = self
        while node is not None:
            out.append(node)
            node = node.parent
        out.reverse()
        return out

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)


@dataclass(frozen=True)
class ExpandResult(Generic[S, C]):
    """The node that was expanded and the child nodes it produced."""
    current_node: Node[S, C]
    result: Tuple[Node[S, C], ...] = ()

    @property
    def expanded_states(self) -> Tuple[S, ...]:
        return tuple(n.state for n in self.result)

    def __len__(self) -> int:
        return len(self.result)
