from bisect import bisect_left
from typing import Dict, List, Sequence, Tuple

from general_search.heuristics.manhattan import manhattan

State = Tuple[int, ...]

def _lis_length(seq: Sequence[int]) -> int:
    tails: List[int] = []
    for x in seq:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)

def _line_penalty(goal_coords: Sequence[int]) -> int:
    # tiles outside the longest in-order subsequence must leave the line and come back
    return 2 * (len(goal_coords) - _lis_length(goal_coords))

def linear_conflict(s: State, goal_pos: Dict[int, Tuple[int, int]], rows: int, cols: int) -> int:
    """
    Manhattan + 2 for every tile that has to step out of its goal row/column
    to let a conflicting tile pass.
    """
    h = manhattan(s, goal_pos, cols)
    for r in range(rows):
        row = s[r * cols:(r + 1) * cols]
        h += _line_penalty([goal_pos[t][1] for t in row if t != 0 and goal_pos[t][0] == r])
    for c in range(cols):
        col = [s[c + r * cols] for r in range(rows)]
        h += _line_penalty([goal_pos[t][0] for t in col if t != 0 and goal_pos[t][1] == c])
    return h
