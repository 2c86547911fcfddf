"""Command-line entry point: solve a puzzle file and print the solution."""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from slidingtile.domains.puzzle_file import format_board, read_board
from slidingtile.errors import MalformedBoard, SlidingTileError
from slidingtile.search.solver import HEURISTICS, TIE_BREAKS, Solver

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="slidingtile", description="Solve an N-puzzle with A* (Manhattan heuristic).")
    ap.add_argument("file", nargs="?", help="Puzzle file: N on the first line, then N rows of N tiles (0 = blank)")
    ap.add_argument("--puzzles_dir", type=Path, default=None, help="Directory the puzzle file is resolved against")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    ap.add_argument("--frames", type=Path, default=None, help="Also save one PNG per solution step here")
    ap.add_argument("--log_level", choices=LOG_LEVELS, default="WARNING")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not args.file:
        print("Please provide a puzzle file name as a command-line argument.", file=sys.stderr)
        return 1

    path = Path(args.file)
    if args.puzzles_dir is not None:
        path = args.puzzles_dir / path

    try:
        initial = read_board(path)
        if initial.dimension() < 2:
            raise MalformedBoard(f"board size must be at least 2, got {initial.dimension()}")
    except (OSError, SlidingTileError) as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    logger.info("solving %s (n=%d)", path, initial.dimension())
    solver = Solver(initial, heuristic=args.heuristic, tie_break=args.tie_break)

    solution = solver.solution()
    if solution is None:
        print("Puzzle is unsolvable")
        return 0

    print(f"Minimum number of moves = {solver.moves()}")
    for board in solution:
        print(format_board(board))

    if args.frames is not None:
        # matplotlib is only imported when frames are requested
        from slidingtile.experiments.visualize_path import save_frames
        frames = save_frames(solution, args.frames)
        logger.info("saved %d frames to %s", len(frames), args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
