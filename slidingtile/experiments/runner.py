from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from slidingtile.domains.board import Board
from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.search.bfs import bfs
from slidingtile.search.solver import HEURISTICS, TIE_BREAKS, Solver

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed", "solvable",
    "moves", "expanded", "generated", "duplicates", "peak_open", "peak_closed",
    "time_sec", "tie_break", "termination", "branch", "bfs_g",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def _gen(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            b = dom.scramble(d, seed)
            attempts += 1
            if dom.parity_solvable(b):
                out.append(Instance(seed=seed, depth=d, board=b))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def solve_row(board: Board, inst: Instance, heuristic: str, tie_break: str,
              solvable_flag: int, verify_bfs: bool = False) -> Dict[str, object]:
    solver = Solver(board, heuristic=heuristic, tie_break=tie_break)
    st = solver.stats()
    row: Dict[str, object] = {
        "algorithm": "A*+twin", "heuristic": heuristic, "n": board.dimension(),
        "depth": inst.depth, "seed": inst.seed, "solvable": solvable_flag,
        "moves": solver.moves(), "expanded": st.expanded, "generated": st.generated,
        "duplicates": st.duplicates, "peak_open": st.peak_open, "peak_closed": st.peak_closed,
        "time_sec": f"{st.time_sec:.6f}", "tie_break": tie_break,
        "termination": st.termination, "branch": st.branch or "", "bfs_g": "",
    }
    if int(solver.is_solvable()) != solvable_flag:
        logger.warning("seed=%d depth=%d: solver says solvable=%s, parity says %d",
                       inst.seed, inst.depth, solver.is_solvable(), solvable_flag)
    if verify_bfs and solvable_flag:
        r = bfs(board)
        row["bfs_g"] = r["g"]
        if r["g"] != solver.moves():
            logger.warning("seed=%d depth=%d: A* moves=%d but BFS optimum=%s",
                           inst.seed, inst.depth, solver.moves(), r["g"])
    return row

def run(n: int, depths: List[int], per_depth: int, heuristic: str = "manhattan", tie_break: str = "h",
        include_unsolvable: bool = False, verify_bfs: bool = False, start_seed: int = 0) -> List[Dict[str, object]]:
    dom = NPuzzle(n)
    insts = _gen(dom, depths, per_depth, start_seed)
    rows: List[Dict[str, object]] = []
    for inst in insts:
        rows.append(solve_row(inst.board, inst, heuristic, tie_break, 1, verify_bfs))
        # twin of a solvable board flips parity
        if include_unsolvable:
            rows.append(solve_row(inst.board.twin(), inst, heuristic, tie_break, 0))
    logger.info("ran %d solver instances (n=%d)", len(rows), n)
    return rows

def write_rows(rows: List[Dict[str, object]], out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        w.writerows(rows)

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="A* + twin N-puzzle experiment runner")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true", help="Also solve the twin of every instance")
    ap.add_argument("--verify_bfs", action="store_true", help="Cross-check move counts with BFS (small N only)")
    ap.add_argument("--log_level", choices=LOG_LEVELS, default="WARNING")
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rows = run(args.n, args.depths, args.per_depth, heuristic=args.heuristic, tie_break=args.tie_break,
               include_unsolvable=args.include_unsolvable, verify_bfs=args.verify_bfs, start_seed=args.seed)
    write_rows(rows, args.out)
    print(f"Wrote {args.out} ({len(rows)} rows)")

if __name__ == "__main__":
    main()
