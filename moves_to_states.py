import argparse
import ast
from typing import List, Sequence

from planning import TowersOfHanoiState, solve


def apply_moves_and_collect_states(
    moves: Sequence[Sequence],
    num_disks: int,
    labels: Sequence = TowersOfHanoiState.DEFAULT_LABELS,
    source=None,
) -> List[str]:
    """
    Replay ``moves`` from a full tower on ``source`` (first label by default)
    and return the state label before the first move and after every move.
    Pegs in a move may be given as labels or as 0..2 indices.
    """
    if source is None:
        source = labels[0]
    state = TowersOfHanoiState(num_disks, labels=labels, start=source)
    states = [state.label()]

    for step, move in enumerate(moves, start=1):
        state.apply_move(move, step=step)
        states.append(state.label())

    return states


def _check_move_literal(moves) -> None:
    if not isinstance(moves, list) or not moves:
        raise ValueError("--moves must be a non-empty list")
    for step, move in enumerate(moves, start=1):
        if not isinstance(move, (list, tuple)) or len(move) != 3:
            raise ValueError(f"Step {step}: invalid move format {move!r}, expected [disk, from_peg, to_peg]")
        if isinstance(move[0], bool) or not isinstance(move[0], int):
            raise ValueError(f"Step {step}: invalid disk id {move[0]!r}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Convert [disk, from_peg, to_peg] moves to successive state labels."
    )
    parser.add_argument(
        "--moves",
        default=None,
        help="Python-style list of moves, e.g. \"[[1,'A','C'],[2,'A','B']]\" or '[[1,0,2],[2,0,1]]'. "
             "If omitted, the optimal solution for --num-disks is used.",
    )
    parser.add_argument(
        "--num-disks",
        type=int,
        default=None,
        help="Number of disks (default: inferred from max disk id in moves)",
    )
    args = parser.parse_args()

    if args.moves is None:
        if args.num_disks is None:
            parser.error("one of --moves or --num-disks is required")
        num_disks = args.num_disks
        try:
            moves = list(solve(num_disks))
        except (TypeError, ValueError) as e:
            parser.error(str(e))
    else:
        try:
            moves = ast.literal_eval(args.moves)
        except (SyntaxError, ValueError) as e:
            parser.error(f"--moves is not a valid Python literal: {e}")
        try:
            _check_move_literal(moves)
        except ValueError as e:
            parser.error(str(e))

        inferred = max(m[0] for m in moves)
        num_disks = args.num_disks if args.num_disks is not None else inferred

    try:
        states = apply_moves_and_collect_states(moves, num_disks)
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    print(" -> ".join(states))
    print("\nIndexed states:")
    for idx, state in enumerate(states):
        print(f"{idx:2d}: {state}")


if __name__ == "__main__":
    main()
