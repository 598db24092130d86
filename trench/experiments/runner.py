from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from trench.domains.trench import GOAL, scramble
from trench.search.a_star import a_star
from trench.search.ucs import uniform_cost_search

State = Tuple[int, ...]

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "ucs": uniform_cost_search,
    "astar": a_star,
}

HEADER = [
    "algorithm", "heuristic", "depth", "seed",
    "expanded", "generated", "g", "time_sec",
    "peak_open", "peak_closed", "tie_break", "termination",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def gen_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Scrambled instances, distinct per depth and never the goal itself."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        seen = set()
        while made < per_depth:
            s = scramble(d, seed)
            if s != GOAL and s not in seen:
                seen.add(s)
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}.")
    return out

def write_row(w, res, inst: Instance):
    w.writerow([
        res.get("algorithm", ""), res.get("heuristic", ""), inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""),
        res.get("tie_break", ""), res.get("termination", "ok"),
    ])

def run(insts: List[Instance], algos: List[str], out: Path, tie_break: str = "h") -> int:
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for name in algos:
                r = ALGORITHMS[name](inst.state, GOAL, tie_break=tie_break, return_path=False)
                logger.info("%s depth=%d seed=%d -> g=%s expanded=%d",
                            r["algorithm"], inst.depth, inst.seed, r["g"], r["expanded"])
                write_row(w, r, inst)
                rows += 1
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="UCS vs A* experiment runner for the nine-men-in-a-trench puzzle")
    ap.add_argument("--algo", choices=["ucs", "astar", "both"], default="both")
    ap.add_argument("--depths", type=int, nargs="+", default=[2, 4, 6, 8])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    ap.add_argument("--out", type=Path, default=Path("results/trench.csv"))
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    algos = ["ucs", "astar"] if args.algo == "both" else [args.algo]
    insts = gen_instances(args.depths, args.per_depth, start_seed=args.seed)
    rows = run(insts, algos, args.out, tie_break=args.tie_break)
    print(f"Wrote {args.out} ({len(insts)} instances, {rows} rows)")

if __name__ == "__main__":
    main()
