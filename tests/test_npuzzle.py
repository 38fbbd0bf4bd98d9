import pytest

from general_search.domains.npuzzle import NPuzzle, NPuzzleProblem, format_board, infer_dim, parse_board
from general_search.experiments.common import make_unsolvable_variant
from general_search.search.errors import ConfigurationError
from general_search.search.general import GeneralSearcher

from conftest import SCENARIO_START


def test_default_goal(p3):
    assert p3.GOAL == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert NPuzzle(2, 3).GOAL == (1, 2, 3, 4, 5, 0)


@pytest.mark.parametrize("rows, cols", [(1, 3), (3, 1), (0, 0)])
def test_too_small_boards_are_rejected(rows, cols):
    with pytest.raises(ConfigurationError):
        NPuzzle(rows, cols)


@pytest.mark.parametrize("board", [
    (1, 2, 3, 4, 5, 6, 7, 8),
    (1, 2, 3, 4, 5, 6, 7, 8, 8),
    (1, 2, 3, 4, 5, 6, 7, 8, 9),
])
def test_validate_rejects_malformed_boards(p3, board):
    with pytest.raises(ConfigurationError):
        p3.validate(board)
    with pytest.raises(ConfigurationError):
        NPuzzleProblem(p3, board)


def test_bad_custom_goal_is_rejected():
    with pytest.raises(ConfigurationError):
        NPuzzle(3, goal=(1, 2, 3))


def test_operators_follow_blank_position(p3):
    names = lambda s: [op.name for op in p3.operators(s)]
    assert names(SCENARIO_START) == ["right", "down", "left", "up"]
    assert names((0, 1, 2, 3, 4, 5, 6, 7, 8)) == ["right", "down"]
    assert names(p3.GOAL) == ["left", "up"]
    assert all(op.cost == 1 for op in p3.operators(SCENARIO_START))


def test_slide(p3):
    assert p3.slide(SCENARIO_START, "down") == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert p3.slide(SCENARIO_START, "up") == (1, 0, 3, 4, 2, 6, 7, 5, 8)
    assert p3.slide(p3.GOAL, "right") is None
    assert p3.slide(p3.GOAL, "down") is None


def test_operator_apply_matches_neighbors(p3):
    via_ops = [op.apply(SCENARIO_START).state for op in p3.operators(SCENARIO_START)]
    assert via_ops == [s for s, _ in p3.neighbors(SCENARIO_START)]


def test_problem_contract(p3, scenario):
    assert scenario.initial_state == SCENARIO_START
    assert not scenario.goal_test(SCENARIO_START)
    assert scenario.goal_test(p3.GOAL)
    assert len(scenario.operators(SCENARIO_START)) == 4


def test_scramble_is_seeded_and_solvable(p3):
    assert p3.scramble(0, seed=1) == p3.GOAL
    a = p3.scramble(25, seed=42)
    assert a == p3.scramble(25, seed=42)
    assert p3.is_solvable(a)


def test_count_inversions():
    assert NPuzzle.count_inversions((1, 2, 3, 0)) == 0
    assert NPuzzle.count_inversions((2, 1, 3, 0)) == 1
    assert NPuzzle.count_inversions((3, 2, 0, 1)) == 3


@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (4, 4), (2, 3), (3, 4)])
def test_solvability_parity(rows, cols):
    p = NPuzzle(rows, cols)
    for seed in range(5):
        s = p.scramble(15, seed)
        assert p.is_solvable(s)
        assert not p.is_solvable(make_unsolvable_variant(s))


def test_fifteen_puzzle_classic_unsolvable():
    p = NPuzzle(4)
    swapped = tuple(list(range(1, 14)) + [15, 14, 0])
    assert not p.is_solvable(swapped)


def test_custom_goal_is_reached():
    p = NPuzzle(3, goal=(0, 1, 2, 3, 4, 5, 6, 7, 8))
    assert p.manhattan(p.GOAL) == 0
    start = p.scramble(12, seed=3)
    res = GeneralSearcher().search(NPuzzleProblem(p, start), p.manhattan)
    assert res.states()[-1] == p.GOAL
    assert p.is_solvable((1, 2, 3, 4, 5, 6, 7, 8, 0))


@pytest.mark.parametrize("text", [
    "1 2 3\n4 0 6\n7 5 8",
    "1,2,3,4,0,6,7,5,8",
    "[1, 2, 3] [4, 0, 6] [7, 5, 8]",
    "1 2 3 / 4 0 6 / 7 5 8",
    "  1\t2\t3   4 0 6 7 5 8  ",
])
def test_parse_board(text):
    assert parse_board(text) == SCENARIO_START


def test_parse_board_rejects_non_integers():
    with pytest.raises(ConfigurationError):
        parse_board("1 2 x")


def test_infer_dim():
    assert infer_dim(range(9)) == 3
    assert infer_dim(range(16)) == 4
    for bad in (range(8), range(1)):
        with pytest.raises(ConfigurationError):
            infer_dim(bad)


def test_format_board():
    assert format_board(SCENARIO_START, 3) == "1 2 3\n4 0 6\n7 5 8"
    lines = format_board(NPuzzle(4).GOAL, 4).splitlines()
    assert lines[0] == " 1  2  3  4"
    assert lines[-1] == "13 14 15  0"
    assert NPuzzle(2, 3).format((1, 2, 3, 4, 5, 0)) == "1 2 3\n4 5 0"
