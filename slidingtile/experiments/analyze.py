#!/usr/bin/env python3
"""Summarize runner CSVs: solvable vs unsolvable (twin) cost per scramble depth."""
import argparse, os
from pathlib import Path
from typing import List, Optional
import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ("expanded", "generated", "time_sec")

# ---------- helpers ----------
def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)

def load(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    need = {"depth", "solvable", "moves", *METRICS}
    missing = need - set(df.columns)
    if missing:
        raise ValueError(f"{path}: missing columns {sorted(missing)}")
    for c in METRICS + ("moves",):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/median/std/sem of each metric per (depth, solvable)."""
    g = df.groupby(["depth", "solvable"])
    parts = []
    for m in METRICS:
        s = g[m].agg(["mean", "median", "std", sem, "size"])
        s["std"] = s["std"].fillna(0.0)
        s.columns = [f"{m}_{c}" for c in ("mean", "median", "std", "sem", "n")]
        parts.append(s)
    out = pd.concat(parts, axis=1).reset_index()
    # one n column is enough
    out = out.rename(columns={"expanded_n": "n"}).drop(columns=["generated_n", "time_sec_n"])
    return out.sort_values(["solvable", "depth"], ascending=[False, True]).reset_index(drop=True)

def mismatches(df: pd.DataFrame) -> pd.DataFrame:
    """Rows where BFS was run and disagrees with the A* move count."""
    if "bfs_g" not in df.columns:
        return df.iloc[0:0]
    bfs_g = pd.to_numeric(df["bfs_g"], errors="coerce")
    has = bfs_g.notna()
    return df[has & (bfs_g != df["moves"])]

def plot_metric(summary: pd.DataFrame, metric: str, outdir: Path, name: str) -> Path:
    plt.figure(figsize=(6,4))
    for flag, label, style in ((1, "solvable", "-"), (0, "unsolvable (twin)", "--")):
        sub = summary[summary["solvable"] == flag]
        if sub.empty:
            continue
        plt.errorbar(sub["depth"], sub[f"{metric}_mean"], yerr=sub[f"{metric}_sem"],
                     marker="o", lw=2, capsize=3, ls=style, label=label)
    plt.xlabel("scramble depth")
    plt.ylabel(metric)
    plt.title(f"A* + twin: mean {metric} by depth")
    plt.legend()
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{name}_{metric}.png"
    plt.savefig(p, dpi=200, bbox_inches="tight")
    plt.close()
    return p

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize A* + twin runner output.")
    ap.add_argument("csv", type=Path, help="CSV produced by runner.py")
    ap.add_argument("--save", type=Path, default=Path("results/plots"))
    ap.add_argument("--no_plots", action="store_true")
    args = ap.parse_args(argv)

    df = load(args.csv)
    summary = summarize(df)
    with pd.option_context("display.max_columns", None, "display.width", 160):
        print(summary[["depth", "solvable", "n", "expanded_mean", "generated_mean", "time_sec_mean"]].to_string(index=False))

    bad = mismatches(df)
    if not bad.empty:
        print(f"\n{len(bad)} rows where A* moves != BFS optimum")

    if not args.no_plots:
        name = args.csv.stem
        for m in METRICS:
            print(f"Saved: {plot_metric(summary, m, args.save, name)}")

if __name__ == "__main__":
    main()
