"""
Print the moves that solve the Towers of Hanoi puzzle.

With no arguments this prints the 15 moves for 4 disks from rod A to rod C
using rod B, one per line:

    Move disk 1 from rod A to rod B
    ...
"""

import argparse
import sys
from typing import Iterator, List, Optional, Tuple

from config import SolverConfig
from planning import Move, TowersOfHanoiSolver, TowersOfHanoiState
from sinks import FileSink, OutputSink, StreamSink, emit_move


def _peg_label(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"peg label must be a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    defaults = SolverConfig()
    parser = argparse.ArgumentParser(
        description="Print the move sequence solving the Towers of Hanoi puzzle."
    )
    parser.add_argument("--num-disks", type=int, default=defaults.num_disks)
    parser.add_argument("--source", type=_peg_label, default=defaults.source)
    parser.add_argument("--target", type=_peg_label, default=defaults.target)
    parser.add_argument("--auxiliary", type=_peg_label, default=defaults.auxiliary)
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="Use the explicit-stack generator instead of recursion",
    )
    parser.add_argument(
        "--output",
        default=defaults.output_path,
        help="Write moves to this file instead of stdout",
    )
    parser.add_argument(
        "--show-states",
        action="store_true",
        help="Print the state label (largest disk first) after each move",
    )
    parser.add_argument(
        "--count-only",
        action="store_true",
        help="Only print the number of moves",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig(
        num_disks=args.num_disks,
        source=args.source,
        target=args.target,
        auxiliary=args.auxiliary,
        iterative=args.iterative,
        output_path=args.output,
        show_states=args.show_states,
        count_only=args.count_only,
    )


def _state_labels(cfg: SolverConfig) -> Tuple[str, str, str]:
    # Digits follow A, B, C when those are the pegs in use, otherwise
    # source, auxiliary, target
    pegs = (cfg.source, cfg.auxiliary, cfg.target)
    if set(pegs) == set(TowersOfHanoiState.DEFAULT_LABELS):
        return TowersOfHanoiState.DEFAULT_LABELS
    return pegs


def prepare(cfg: SolverConfig) -> Tuple[Iterator[Move], Optional[TowersOfHanoiState]]:
    """
    Check ``cfg`` and return the move iterator plus the state tracker used by
    ``--show-states``. Raises TypeError/ValueError before anything is written.
    """
    solver = TowersOfHanoiSolver(iterative=cfg.iterative)
    moves = solver.moves(cfg.num_disks, cfg.source, cfg.target, cfg.auxiliary)

    state = None
    if cfg.show_states:
        state = TowersOfHanoiState(cfg.num_disks, labels=_state_labels(cfg), start=cfg.source)
    return moves, state


def write_moves(
    cfg: SolverConfig,
    sink: OutputSink,
    moves: Iterator[Move],
    state: Optional[TowersOfHanoiState] = None,
) -> int:
    count = 0
    for move in moves:
        count += 1
        if cfg.count_only:
            continue
        emit_move(sink, move)
        if state is not None:
            state.apply_move(move, step=count)
            sink.emit_string("  state ")
            sink.emit_string(state.label())
            sink.emit_string("\n")

    if cfg.count_only:
        sink.emit_int(count)
        sink.emit_string("\n")
    return count


def run(cfg: SolverConfig, sink: OutputSink) -> int:
    """Write the solution for ``cfg`` to ``sink`` and return the number of moves."""
    moves, state = prepare(cfg)
    return write_moves(cfg, sink, moves, state)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = config_from_args(args)

    try:
        moves, state = prepare(cfg)
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    # The output file is only opened (and truncated) once the arguments are valid
    if cfg.output_path:
        with FileSink(cfg.output_path) as sink:
            write_moves(cfg, sink, moves, state)
    else:
        sink = StreamSink(sys.stdout)
        write_moves(cfg, sink, moves, state)
        sink.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
