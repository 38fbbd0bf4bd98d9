from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import math
import random
import re

from general_search.heuristics.linear_conflict import linear_conflict as _linear_conflict
from general_search.heuristics.manhattan import manhattan as _manhattan
from general_search.heuristics.misplaced import misplaced_tiles as _misplaced
from general_search.search.errors import ConfigurationError
from general_search.search.node import Operator
from general_search.search.problem import Problem

State = Tuple[int, ...]

# blank moves in expansion order: (name, d_row, d_col)
MOVES = (("right", 0, 1), ("down", 1, 0), ("left", 0, -1), ("up", -1, 0))
MOVE_COST = 1


class NPuzzle:
    """
    R×C sliding-tile puzzle (0 is the blank). Square when cols is omitted.
    Works for 2×2, 3×3 (8-puzzle), 4×4 (15-puzzle), 3×4, etc.

    goal defaults to 1..R*C-1 followed by the blank.
    """
    def __init__(self, rows: int, cols: Optional[int] = None, goal: Optional[Sequence[int]] = None):
        cols = rows if cols is None else cols
        if rows < 2 or cols < 2:
            raise ConfigurationError(f"board must be at least 2x2, got {rows}x{cols}")
        self.R = rows
        self.C = cols
        self.size = rows * cols
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])
        if goal is not None:
            self.GOAL = self.validate(goal)

        # Precompute the legal blank moves for every blank index
        self._nei: Dict[int, Tuple[Tuple[str, int], ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, cols)
            moves = []
            for name, dr, dc in MOVES:
                if 0 <= r + dr < rows and 0 <= c + dc < cols:
                    moves.append((name, i + dr * cols + dc))
            self._nei[i] = tuple(moves)

        self._ops: Dict[str, Operator[State, int]] = {
            name: Operator(name, MOVE_COST, lambda s, name=name: self.slide(s, name))
            for name, _, _ in MOVES
        }

        # Goal cell of each tile
        self._goal_pos: Dict[int, Tuple[int, int]] = {
            t: divmod(i, cols) for i, t in enumerate(self.GOAL) if t != 0
        }

    @property
    def N(self) -> Optional[int]:
        return self.R if self.R == self.C else None

    def __repr__(self) -> str:
        return f"NPuzzle({self.R}x{self.C})"

    def validate(self, s: Sequence[int]) -> State:
        """Return s as a tuple, or raise ConfigurationError if it is not a board of this puzzle."""
        s = tuple(s)
        if len(s) != self.size:
            raise ConfigurationError(f"expected {self.size} tiles for a {self.R}x{self.C} board, got {len(s)}")
        if sorted(s) != list(range(self.size)):
            raise ConfigurationError(f"board must be a permutation of 0..{self.size - 1}: {s}")
        return s

    # ---------- transitions ----------
    def slide(self, s: State, move: str) -> Optional[State]:
        """Board after moving the blank, or None when the move leaves the grid."""
        z = s.index(0)
        for name, j in self._nei[z]:
            if name == move:
                lst = list(s)
                lst[z], lst[j] = lst[j], lst[z]
                return tuple(lst)
        return None

    def operators(self, s: State) -> List[Operator[State, int]]:
        return [self._ops[name] for name, _ in self._nei[s.index(0)]]

    def neighbors(self, s: State) -> List[Tuple[State, int]]:
        """Return list of (next_state, cost). Unit edge costs.

        Swaps tiles directly without going through the operators; the tests
        use it as an independent reference for the move generator.
        """
        z = s.index(0)
        out: List[Tuple[State, int]] = []
        for _, j in self._nei[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((tuple(lst), MOVE_COST))
        return out

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> State:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = [j for _, j in self._nei[z]]
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return s

    # ---------- solvability ----------
    @staticmethod
    def count_inversions(s: Sequence[int]) -> int:
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        return inv

    def _parity(self, s: State) -> int:
        # Invariant under every legal move:
        # - width odd:  inversions
        # - width even: inversions + blank row counted from the bottom (1-based)
        inv = self.count_inversions(s)
        if self.C % 2 == 1:
            return inv % 2
        blank_row_from_bottom = self.R - s.index(0) // self.C
        return (inv + blank_row_from_bottom) % 2

    def is_solvable(self, s: Sequence[int]) -> bool:
        """True when s and GOAL lie in the same half of the permutation space."""
        return self._parity(self.validate(s)) == self._parity(self.GOAL)

    # ---------- heuristics ----------
    def manhattan(self, s: State) -> int:
        return _manhattan(s, self._goal_pos, self.C)

    def misplaced_tiles(self, s: State) -> int:
        return _misplaced(s, self.GOAL)

    def linear_conflict(self, s: State) -> int:
        return _linear_conflict(s, self._goal_pos, self.R, self.C)

    def uniform(self, s: State) -> int:
        return 0

    def format(self, s: State) -> str:
        return format_board(s, self.C)


class NPuzzleProblem(Problem[State, int]):
    """Reach puzzle.GOAL from initial; boards are validated up front."""
    def __init__(self, puzzle: NPuzzle, initial: Sequence[int]):
        super().__init__(puzzle.validate(initial))
        self.puzzle = puzzle

    def operators(self, state: State) -> List[Operator[State, int]]:
        return self.puzzle.operators(state)

    def goal_test(self, state: State) -> bool:
        return state == self.puzzle.GOAL


def parse_board(text: str) -> State:
    """'1 2 3 / 4 0 6 / 7 5 8' in any mix of whitespace, commas, slashes or brackets."""
    tokens = [t for t in re.split(r"[\s,;/\[\]()]+", text.strip()) if t]
    try:
        return tuple(int(t) for t in tokens)
    except ValueError:
        raise ConfigurationError(f"board must contain integers only: {text!r}") from None


def infer_dim(s: Sequence[int]) -> int:
    """Side length of a square board with len(s) cells."""
    n = math.isqrt(len(s))
    if n < 2 or n * n != len(s):
        raise ConfigurationError(f"{len(s)} tiles do not form a square board")
    return n


def format_board(s: Sequence[int], cols: int) -> str:
    width = len(str(max(s)))
    lines = []
    for r in range(len(s) // cols):
        row = s[r * cols:(r + 1) * cols]
        lines.append(" ".join(str(t).rjust(width) for t in row))
    return "\n".join(lines)
