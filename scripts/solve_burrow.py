"""
Solve an amphipod burrow diagram with A*.

- Reads the diagram from a text file
- Optionally unfolds it into the 4-deep variant (two fixed rows inserted)
- Prints the minimal energy and search statistics
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from core.astar import BurrowAStar, SearchStatus
from strategies.generators.burrow_moves import BurrowMoveGenerator
from strategies.heuristics.room_entrance import RoomEntranceHeuristic
from strategies.open_policy.priority import PriorityOpen
from utils.burrow_loader import load_burrow


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minimal energy to organize an amphipod burrow")
    parser.add_argument("--input", type=Path, default=Path("inputs/day23.txt"), help="diagram file")
    parser.add_argument("--unfold", action="store_true", help="insert the two extra room rows")
    parser.add_argument("--max-iterations", type=int, default=None, help="expansion budget")
    parser.add_argument("--no-reopen", action="store_true", help="enqueue every configuration at most once")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        burrow = load_burrow(args.input, unfold=args.unfold)
    except (OSError, ValueError) as exc:
        print(f"Не удалось прочитать {args.input}: {exc}", file=sys.stderr)
        return 2

    if args.verbose:
        print("\n".join(burrow.layout))
        print(burrow.graph)

    solver = BurrowAStar(
        graph=burrow.graph,
        start=burrow.configuration,
        generator=BurrowMoveGenerator(),
        heuristic=RoomEntranceHeuristic(),
        open_policy=PriorityOpen(),
        reopen=not args.no_reopen,
    )
    result = solver.run(max_iterations=args.max_iterations, verbose=args.verbose)
    stats = solver.get_statistics()

    if result.status is SearchStatus.SOLVED:
        print(f"Found {result.cost}")
    elif result.status is SearchStatus.ABORTED:
        print(f"Aborted after {result.expansions} expansions")
    else:
        print("No solution")

    print(
        f"expansions={stats['expansions']} seen={stats['seen_configurations']} "
        f"runtime={stats['runtime_seconds']:.2f}s"
    )
    return 0 if result.status is SearchStatus.SOLVED else 1


if __name__ == "__main__":
    raise SystemExit(main())
