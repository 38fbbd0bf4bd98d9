# Defines the interface every searchable problem implements.
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Hashable, Sequence, TypeVar

from general_search.search.node import Operator

S = TypeVar("S", bound=Hashable)
C = TypeVar("C", int, float)


class Problem(ABC, Generic[S, C]):
    """
    State-space problem handed to GeneralSearcher.

    Implementations must be deterministic and free of side effects: the
    engine may ask for the operators of the same state more than once.
    A state with no operators simply expands to nothing.
    """
    def __init__(self, initial_state: S):
        self._initial_state = initial_state

    @property
    def initial_state(self) -> S:
        return self._initial_state

    @abstractmethod
    def operators(self, state: S) -> Sequence[Operator[S, C]]:
        """Operators applicable to state (may be empty)."""

    @abstractmethod
    def goal_test(self, state: S) -> bool:
        ...
