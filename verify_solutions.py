"""
Verify the generated Towers of Hanoi solutions over a range of disk counts.

For each disk count it checks that:
- the recursive and explicit-stack generators agree move for move
- the sequence has 2^n - 1 moves
- replaying it never puts a larger disk on a smaller one and ends with the
  whole tower on the target peg
- (up to --max-graph-disks) it is a shortest path in the state graph

then prints a per-disk summary table.
"""

import argparse
import json
from pathlib import Path
from typing import Dict, Optional

from tqdm import tqdm

from config import VerifyConfig
from planning import Peg, optimal_move_count, simulate, solve, solve_iterative
from state_space_graph import build_state_graph, is_shortest_path


def verify_disk_count(num_disks: int, check_graph: bool) -> Dict:
    moves = list(solve(num_disks, Peg.A, Peg.C, Peg.B))
    iterative_moves = list(solve_iterative(num_disks, Peg.A, Peg.C, Peg.B))

    result = {
        "num_disks": num_disks,
        "num_moves": len(moves),
        "expected_moves": optimal_move_count(num_disks),
        "generators_agree": moves == iterative_moves,
        "legal": True,
        "solved": False,
        "optimal": None,
        "error": None,
    }

    try:
        final_state = simulate(moves, num_disks, source=Peg.A)
        result["solved"] = final_state.is_goal(Peg.C)
    except ValueError as e:
        result["legal"] = False
        result["error"] = str(e)

    if check_graph:
        G = build_state_graph(num_disks)
        result["optimal"] = is_shortest_path(G, moves, num_disks)

    result["passed"] = (
        result["generators_agree"]
        and result["legal"]
        and result["solved"]
        and result["num_moves"] == result["expected_moves"]
        and result["optimal"] is not False
    )
    return result


def verify_range(cfg: VerifyConfig) -> Dict:
    if cfg.min_disks < 0 or cfg.max_disks < cfg.min_disks:
        raise ValueError(f"Invalid disk range {cfg.min_disks}..{cfg.max_disks}")

    summary = {
        "min_disks": cfg.min_disks,
        "max_disks": cfg.max_disks,
        "total": 0,
        "passed": 0,
        "per_disk": {},
    }

    disk_counts = range(cfg.min_disks, cfg.max_disks + 1)
    for num_disks in tqdm(disk_counts, desc="Verifying", disable=not cfg.show_progress):
        result = verify_disk_count(num_disks, check_graph=num_disks <= cfg.max_graph_disks)
        summary["per_disk"][num_disks] = result
        summary["total"] += 1
        if result["passed"]:
            summary["passed"] += 1

    return summary


def _mark(value: Optional[bool]) -> str:
    if value is None:
        return "-"
    return "yes" if value else "NO"


def print_summary(summary: Dict) -> None:
    total = summary["total"]
    passed = summary["passed"]

    print("=" * 72)
    print(f"Disks {summary['min_disks']}..{summary['max_disks']} | Passed: {passed}/{total}")
    print(f"{'Disks':<8} {'Moves':<10} {'Expected':<10} {'Agree':<7} {'Legal':<7} {'Solved':<7} {'Optimal':<8}")
    print("-" * 72)
    for num_disks in sorted(summary["per_disk"]):
        r = summary["per_disk"][num_disks]
        print(
            f"{num_disks:<8} {r['num_moves']:<10} {r['expected_moves']:<10} "
            f"{_mark(r['generators_agree']):<7} {_mark(r['legal']):<7} "
            f"{_mark(r['solved']):<7} {_mark(r['optimal']):<8}"
        )
        if r["error"]:
            print(f"         error: {r['error']}")


def save_summary(summary: Dict, output_path: str) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(summary, f, indent=2)
    print(f"Saved {path}")


def main() -> int:
    defaults = VerifyConfig()
    parser = argparse.ArgumentParser(
        description="Verify generated Towers of Hanoi solutions for a range of disk counts."
    )
    parser.add_argument("--min-disks", type=int, default=defaults.min_disks)
    parser.add_argument("--max-disks", type=int, default=defaults.max_disks)
    parser.add_argument(
        "--max-graph-disks",
        type=int,
        default=defaults.max_graph_disks,
        help="Largest disk count checked against the state graph (3^n states)",
    )
    parser.add_argument("--output", default=defaults.output_path, help="Write the summary as JSON")
    parser.add_argument("--no-progress", action="store_true")
    args = parser.parse_args()

    cfg = VerifyConfig(
        min_disks=args.min_disks,
        max_disks=args.max_disks,
        max_graph_disks=args.max_graph_disks,
        output_path=args.output,
        show_progress=not args.no_progress,
    )

    try:
        summary = verify_range(cfg)
    except ValueError as e:
        parser.error(str(e))

    print_summary(summary)
    if cfg.output_path:
        save_summary(summary, cfg.output_path)

    return 0 if summary["passed"] == summary["total"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
