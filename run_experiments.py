#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("8-puzzle Manhattan, with twins", "python -m slidingtile.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --heuristic manhattan --include_unsolvable --verify_bfs --out results/p8_manhattan.csv")
    run("8-puzzle Hamming", "python -m slidingtile.experiments.runner --n 3 --depths 6 10 14 --per_depth 10 --heuristic hamming --out results/p8_hamming.csv")
    run("15-puzzle Manhattan", "python -m slidingtile.experiments.runner --n 4 --depths 6 10 14 18 --per_depth 10 --heuristic manhattan --out results/p15_manhattan.csv")
    run("Summary", "python -m slidingtile.experiments.analyze results/p8_manhattan.csv --save results/plots")

if __name__ == "__main__":
    main()
