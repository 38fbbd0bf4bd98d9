from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar
import heapq
import itertools

from general_search.search.errors import EmptyQueueError

T = TypeVar("T")

def _identity(priority: Any) -> Any:
    return priority

class PriorityQueue(Generic[T]):
    """
    Min-priority queue on top of heapq.

    comparator: callable(priority) -> sort key. Entries with equal keys come
    out in insertion order (earlier first), so runs are reproducible.
    The heap cannot decrease a key in place; callers that need it insert a
    fresh entry and skip the stale one when it surfaces.
    """
    def __init__(self, comparator: Optional[Callable[[Any], Any]] = None):
        self._comparator = comparator or _identity
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    @property
    def comparator(self) -> Callable[[Any], Any]:
        return self._comparator

    def insert(self, item: T, priority: Any) -> None:
        heapq.heappush(self._heap, (self._comparator(priority), next(self._counter), item))

    def extract_min(self) -> T:
        if not self._heap:
            raise EmptyQueueError("extract_min() from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise EmptyQueueError("peek() at an empty priority queue")
        return self._heap[0][2]

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
