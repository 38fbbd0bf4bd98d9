from typing import Dict, Tuple

State = Tuple[int, ...]

def manhattan(s: State, goal_pos: Dict[int, Tuple[int, int]], cols: int) -> int:
    """Sum of grid distances from each tile to its goal cell (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, cols)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
