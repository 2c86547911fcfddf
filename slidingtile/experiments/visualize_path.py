#!/usr/bin/env python3
import argparse, logging, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List, Sequence

from slidingtile.domains.board import Board
from slidingtile.domains.puzzle_file import read_board
from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.search.solver import HEURISTICS, Solver

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

def draw_board(board: Board, out_path: Path):
    n = board.dimension()
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(board.state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(path: Sequence[Board], outdir: Path) -> List[Path]:
    """One PNG per board, named step_000.png, step_001.png, ..."""
    out: List[Path] = []
    for i, b in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(b, p)
        out.append(p)
    return out

def main():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--file", type=Path, default=None, help="Puzzle file; overrides --n/--depth/--seed")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    p.add_argument("--log_level", choices=LOG_LEVELS, default="WARNING")
    args = p.parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    start = read_board(args.file) if args.file else NPuzzle(args.n).scramble(args.depth, args.seed)
    solver = Solver(start, heuristic=args.heuristic)
    solution = solver.solution()
    if solution is None:
        print("Puzzle is unsolvable; nothing to draw.")
        return

    outdir = Path(args.outdir)
    frames = save_frames(solution, outdir)
    print(f"Saved {len(frames)} frames to {outdir}")

if __name__ == "__main__":
    main()
