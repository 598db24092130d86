#!/usr/bin/env python3
"""Solve one nine-men-in-a-trench configuration with UCS or A* and print the report."""
import argparse, logging

from trench.domains.trench import DEFAULT_START, GOAL, format_state, validate_state
from trench.search.a_star import a_star
from trench.search.ucs import uniform_cost_search

SEARCHES = {"ucs": uniform_cost_search, "astar": a_star}

def read_state(ap: argparse.ArgumentParser, args):
    if args.recess is not None and args.trench is None:
        ap.error("--recess is only valid together with --trench")
    if args.state is not None:
        values = args.state
    elif args.trench is not None:
        if args.recess is None:
            ap.error("--trench and --recess must be given together")
        values = args.trench + args.recess
    else:
        values = list(DEFAULT_START)
    try:
        return validate_state(values)
    except ValueError as e:
        ap.error(str(e))

def show_expanding(show_costs: bool):
    def trace(node, peak_open):
        print("Expanding state:")
        if show_costs and node.parent is not None:
            print(f"The best state to expand with g(n) = {node.path_cost} "
                  f"and h(n) = {node.heuristic} is...")
        print(format_state(node.state))
    return trace

def show_queue_size(node, peak_open):
    print(f"Queue size: {peak_open}")

def print_report(res):
    if res["solved"]:
        print("Goal!!!")
        print(f"Solution found at depth: {res['g']}")
    else:
        print("No solution found.")
    print(f"Nodes expanded: {res['expanded']}")
    print(f"Maximum queue size: {res['peak_open']}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Nine men in a trench: Uniform Cost Search / A* solver")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--default", action="store_true", help="Use the default puzzle (this is also the fallback)")
    src.add_argument("--state", type=int, nargs=13, metavar="N",
                     help="All 13 cells: 10 trench values then 3 recess values, 0 is blank")
    src.add_argument("--trench", type=int, nargs=10, metavar="N", help="Bottom row (10 values)")
    ap.add_argument("--recess", type=int, nargs=3, metavar="N", help="Recess values (3 values)")
    ap.add_argument("--algo", choices=["ucs", "astar"], default="astar")
    ap.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    ap.add_argument("--trace", action="store_true", help="Print every expanded state")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging from the search engine")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    start = read_state(ap, args)
    hooks = {}
    if args.trace:
        # A* reports g/h per state, UCS reports the queue size after each expansion
        hooks["on_expand"] = show_expanding(args.algo == "astar")
        if args.algo == "ucs":
            hooks["after_expand"] = show_queue_size
    res = SEARCHES[args.algo](start, GOAL, tie_break=args.tie_break, return_path=False, **hooks)
    print_report(res)
    return res

if __name__ == "__main__":
    main()
