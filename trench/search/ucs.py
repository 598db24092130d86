from __future__ import annotations
from typing import Any, Dict, Tuple

from trench.domains.trench import GOAL
from trench.heuristics.zero import zero
from trench.search.best_first import best_first_search

State = Tuple[int, ...]

def uniform_cost_search(start: State, goal: State = GOAL, **kwargs) -> Dict[str, Any]:
    return best_first_search(start, goal, hfun=zero, algorithm="UCS", heuristic_name="zero", **kwargs)
