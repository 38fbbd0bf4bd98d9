#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional, TextIO

from general_search.domains.npuzzle import NPuzzle, format_board, infer_dim, parse_board
from general_search.experiments.common import add_common_args, configure_logging, friendly_time
from general_search.experiments.solver import NPuzzleSolver
from general_search.heuristics.select import HEURISTICS
from general_search.search.errors import ConfigurationError

DEFAULT_BOARD = "4 2 8 6 0 3 7 5 1"


def read_board_interactive(n: int, what: str, stdin: Optional[TextIO] = None) -> List[int]:
    stdin = stdin or sys.stdin
    print(f"Enter your {what}, use a zero to represent the blank")
    tiles: List[int] = []
    for row in range(n):
        print(f"Enter the row {row + 1}, use space or tabs between numbers: ", end="", flush=True)
        tiles.extend(parse_board(stdin.readline()))
    return tiles


def print_solution(solver: NPuzzleSolver, result) -> None:
    if not result.succeeded:
        print("No solution!")
        return
    hfun = solver.heuristic_function()
    cols = solver.puzzle.C
    for node in solver.solution_path()[1:]:
        print(f"The best state to expand with a g(n) = {solver.g_func(node)} "
              f"and h(n) = {hfun(node.state)} is...")
        print(format_board(node.state, cols))
        print("Expanding this node...")
        print()
    print("Goal!!")
    print()
    print(f"To solve this problem, the search algorithm expanded a total of {result.nodes_expanded} nodes.")
    print(f"The maximum number of nodes in the queue at any one time was {result.max_queue_length}.")
    print(f"The depth of the goal node was {result.depth}.")
    print(f"Search time: {friendly_time(result.elapsed)}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve one N-puzzle board with A*.")
    ap.add_argument("--board", default=DEFAULT_BOARD, help="Initial board, row-major, 0 = blank")
    ap.add_argument("--goal", default=None, help="Goal board (default 1..N*N-1 then blank)")
    ap.add_argument("--interactive", action="store_true", help="Type the board (and goal) row by row")
    ap.add_argument("--n", type=int, default=3, help="Board side for --interactive")
    ap.add_argument("--algorithm", choices=list(HEURISTICS), default="manhattan",
                    help="'uniform' = uniform cost search, others = A* with that heuristic")
    ap.add_argument("--tie_break", choices=["fifo", "h", "g", "lifo"], default="fifo")
    ap.add_argument("--check-solvable", action="store_true",
                    help="Report 'No solution!' from the parity check without searching")
    add_common_args(ap)
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.interactive:
            board = read_board_interactive(args.n, "puzzle")
            goal = read_board_interactive(args.n, "goal state")
        else:
            board = parse_board(args.board)
            goal = parse_board(args.goal) if args.goal else None

        solver = NPuzzleSolver(args.algorithm, tie_break=args.tie_break)
        n = infer_dim(board)
        print("Expanding state:")
        print(format_board(board, n))
        print()

        if args.check_solvable:
            if not NPuzzle(n, goal=goal).is_solvable(board):
                print("No solution!")
                return 1

        result = solver.solve(board, goal)
    except ConfigurationError as e:
        ap.error(str(e))

    print_solution(solver, result)
    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
