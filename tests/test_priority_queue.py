import pytest

from general_search.search.errors import EmptyQueueError
from general_search.search.priority_queue import PriorityQueue


def test_extracts_in_ascending_priority():
    q = PriorityQueue()
    for item, pr in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
        q.insert(item, pr)
    assert [q.extract_min() for _ in range(4)] == ["a", "b", "c", "d"]
    assert q.is_empty()


def test_equal_priorities_come_out_in_insertion_order():
    q = PriorityQueue()
    for item in ["first", "second", "third"]:
        q.insert(item, 5)
    q.insert("urgent", 1)
    assert q.extract_min() == "urgent"
    assert [q.extract_min() for _ in range(3)] == ["first", "second", "third"]


def test_tuple_priorities_break_ties_on_later_fields():
    q = PriorityQueue()
    q.insert("deep", (4, 1))
    q.insert("shallow", (4, 0))
    assert q.extract_min() == "shallow"


def test_peek_does_not_remove():
    q = PriorityQueue()
    q.insert("x", 2)
    q.insert("y", 1)
    assert q.peek() == "y"
    assert q.size() == 2
    assert len(q) == 2


def test_comparator_is_applied_to_priorities():
    neg = lambda p: -p
    q = PriorityQueue(neg)
    assert q.comparator is neg
    q.insert("low", 1)
    q.insert("high", 10)
    assert q.extract_min() == "high"


def test_default_comparator_is_identity():
    q = PriorityQueue()
    assert q.comparator(7) == 7


def test_empty_queue_raises():
    q = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        q.extract_min()
    with pytest.raises(EmptyQueueError):
        q.peek()
    assert not q


def test_empty_queue_error_is_an_index_error():
    with pytest.raises(IndexError):
        PriorityQueue().extract_min()
