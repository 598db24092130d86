from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Set, Tuple
from time import perf_counter
import logging

from trench.domains.trench import GOAL, successors
from trench.search.frontier import Frontier
from trench.search.node import Node, reconstruct_path, solution_actions

logger = logging.getLogger(__name__)

State = Tuple[int, ...]
Heuristic = Callable[[State, State], int]

def best_first_search(
    start: State,
    goal: State = GOAL,
    hfun: Optional[Heuristic] = None,
    algorithm: str = "best-first",
    heuristic_name: str = "",
    tie_break: str = "h",
    return_path: bool = True,
    on_expand: Optional[Callable[[Node, int], None]] = None,
    after_expand: Optional[Callable[[Node, int], None]] = None,
) -> Dict[str, Any]:
    """
    Graph search ordered by f = g + h over the trench puzzle, with instrumentation.

    The explored set is the only duplicate filter: successors already expanded
    are dropped, but the frontier may hold several entries for one state and
    each of them is expanded (and counted) when popped.
    on_expand: callable(node, peak_open) invoked for every popped node before
    the goal test.
    after_expand: callable(node, peak_open) invoked once a non-goal node has been
    expanded, with the peak frontier size updated for its successors.
    """
    hfun = hfun or (lambda s, g: 0)
    t0 = perf_counter()

    frontier = Frontier(tie_break)
    frontier.push(Node(start, heuristic=hfun(start, goal)))
    explored: Set[State] = set()

    expanded = 0
    generated = 0
    peak_open = 1

    def report(node: Optional[Node]) -> Dict[str, Any]:
        solved = node is not None
        out: Dict[str, Any] = {
            "algorithm": algorithm,
            "heuristic": heuristic_name,
            "termination": "ok" if solved else "exhausted",
            "solved": solved,
            "g": node.path_cost if solved else None,
            "expanded": expanded,
            "generated": generated,
            "peak_open": peak_open,
            "peak_closed": len(explored),
            "time": perf_counter() - t0,
            "tie_break": tie_break,
            "path": None,
            "actions": None,
        }
        if solved and return_path:
            out["path"] = reconstruct_path(node)
            out["actions"] = solution_actions(node)
        return out

    while frontier:
        node = frontier.pop()
        if on_expand is not None:
            on_expand(node, peak_open)

        if node.state == goal:
            logger.info("%s: goal at depth %d after %d expansions (peak frontier %d)",
                        algorithm, node.path_cost, expanded, peak_open)
            return report(node)

        expanded += 1
        explored.add(node.state)
        logger.debug("expand #%d g=%d h=%d %s", expanded, node.path_cost, node.heuristic, node.state)

        for ordinal, action, s2 in successors(node.state):
            if s2 in explored:
                continue
            generated += 1
            frontier.push(Node(s2, parent=node, action=(ordinal, action),
                               path_cost=node.path_cost + 1, heuristic=hfun(s2, goal)))

        peak_open = max(peak_open, len(frontier))
        if after_expand is not None:
            after_expand(node, peak_open)

    logger.info("%s: frontier exhausted after %d expansions (peak frontier %d)",
                algorithm, expanded, peak_open)
    return report(None)
