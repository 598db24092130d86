#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(args):
    cmd = [sys.executable, "-m", *args]
    print("Running:", " ".join(cmd))
    r = subprocess.run(cmd)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    depths = ["--depths", "2", "4", "6", "8", "--per_depth", "10"]
    run(["trench.experiments.runner", *depths, "--algo", "both", "--out", "results/trench.csv"])
    run(["trench.experiments.runner", *depths, "--algo", "astar", "--tie_break", "fifo",
         "--out", "results/trench_fifo.csv"])
    run(["trench.experiments.plot", "results/trench.csv", "--save", "results/plots"])

if __name__ == "__main__":
    main()
