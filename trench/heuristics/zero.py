from typing import Tuple

State = Tuple[int, ...]

def zero(s: State, goal: State) -> int:
    """h(n) = 0 everywhere; best-first search degenerates to Uniform Cost Search."""
    return 0
