import itertools

import pytest

from general_search.domains.npuzzle import NPuzzle, NPuzzleProblem
from general_search.search.bfs import distances

SCENARIO_START = (1, 2, 3, 4, 0, 6, 7, 5, 8)


@pytest.fixture
def p2():
    return NPuzzle(2)


@pytest.fixture
def p3():
    return NPuzzle(3)


@pytest.fixture
def scenario(p3):
    return NPuzzleProblem(p3, SCENARIO_START)


@pytest.fixture
def boards_2x2(p2):
    """All 24 arrangements of the 2x2 board."""
    return [tuple(s) for s in itertools.permutations(range(p2.size))]


@pytest.fixture(scope="session")
def p3_distances():
    """Exact move counts to the 3x3 goal for every state within 14 moves."""
    p = NPuzzle(3)
    return distances(NPuzzleProblem(p, p.GOAL), max_depth=14)
