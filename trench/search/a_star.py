from __future__ import annotations
from typing import Any, Dict, Tuple

from trench.domains.trench import GOAL
from trench.heuristics.manhattan import manhattan
from trench.search.best_first import best_first_search

State = Tuple[int, ...]

def a_star(start: State, goal: State = GOAL, **kwargs) -> Dict[str, Any]:
    """A* with the Manhattan-distance heuristic (admissible and consistent here)."""
    return best_first_search(start, goal, hfun=manhattan, algorithm="A*", heuristic_name="manhattan", **kwargs)
