from typing import Dict, Tuple
from trench.domains.trench import RECESS_OF, TRENCH_LEN

State = Tuple[int, ...]

def cell_coords(idx: int) -> Tuple[int, int]:
    """(row, column) of a cell: trench is row 0, recesses are row 1 above columns 3, 5, 7."""
    if idx < TRENCH_LEN:
        return 0, idx
    return 1, RECESS_OF[idx]

def manhattan(s: State, goal: State) -> int:
    """Sum of Manhattan distances of misplaced pieces to their goal cells (blanks ignored)."""
    goal_pos: Dict[int, int] = {t: j for j, t in enumerate(goal) if t != 0}
    dist = 0
    for i, tile in enumerate(s):
        if tile == 0 or tile == goal[i]:
            continue
        r1, c1 = cell_coords(i)
        r2, c2 = cell_coords(goal_pos[tile])
        dist += abs(c1 - c2) + abs(r1 - r2)
    return dist
