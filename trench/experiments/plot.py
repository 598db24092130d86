#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "peak_open", "time_sec"]

def load(paths: List[str]) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(p)
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Keep solved rows only
    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()

    for c in ["depth", "seed", "g", "generated", "peak_closed"] + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std/count per (algorithm, depth) for every metric present."""
    metrics = [m for m in METRICS if m in df.columns]
    agg = df.groupby(["algorithm", "depth"])[metrics].agg(["mean", "std", "count"])
    agg.columns = [f"{m}_{stat}" for m, stat in agg.columns]
    return agg.fillna(0.0).reset_index()

def plot_metric(ax, summary: pd.DataFrame, metric: str):
    algos = sorted(summary["algorithm"].unique())
    width = 0.8 / max(len(algos), 1)
    depths = np.sort(summary["depth"].unique())
    x = np.arange(len(depths))
    for k, algo in enumerate(algos):
        sub = summary[summary["algorithm"] == algo].set_index("depth").reindex(depths)
        ys = sub[f"{metric}_mean"].to_numpy(dtype=float)
        es = sub[f"{metric}_std"].to_numpy(dtype=float)
        ax.bar(x + (k - (len(algos) - 1) / 2) * width, np.nan_to_num(ys), width,
               yerr=np.nan_to_num(es), capsize=3, label=algo)
    ax.set_xticks(x)
    ax.set_xticklabels([str(int(d)) for d in depths])
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    if metric != "time_sec":
        ax.set_yscale("log")
    ax.grid(True, axis="y", alpha=0.3)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot trench experiment CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    summary = summarize(df)
    outdir.mkdir(parents=True, exist_ok=True)
    summary.to_csv(outdir / f"{base}_summary.csv", index=False)

    fig, axes = plt.subplots(1, len(METRICS), figsize=(5 * len(METRICS), 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, summary, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)

if __name__ == "__main__":
    main()
