from __future__ import annotations
from typing import Dict, Iterator, List, Sequence, Tuple
import random

State = Tuple[int, ...]  # 13-length tuple: trench 0..9, recesses 10..12, 0 is blank

TRENCH_LEN = 10
SIZE = 13
GOAL: State = (1, 2, 3, 4, 5, 6, 7, 8, 9, 0, 0, 0, 0)
DEFAULT_START: State = (0, 2, 3, 4, 5, 6, 7, 8, 9, 1, 0, 0, 0)

# recess index -> trench index it sits above
RECESS_OF: Dict[int, int] = {10: 3, 11: 5, 12: 7}

# lift-k moves the blank from trench into recess k, lower-k moves it back down
_LIFT = {3: "lift-1", 5: "lift-2", 7: "lift-3"}
_LOWER = {10: "lower-1", 11: "lower-2", 12: "lower-3"}
# vertical action -> cell it swaps with
_VERTICAL: Dict[str, int] = {}
for _r, _t in RECESS_OF.items():
    _VERTICAL[_LIFT[_t]] = _r
    _VERTICAL[_LOWER[_r]] = _t

REVERSE_ACTION: Dict[str, str] = {
    "left": "right",
    "right": "left",
    "lift-1": "lower-1",
    "lift-2": "lower-2",
    "lift-3": "lower-3",
    "lower-1": "lift-1",
    "lower-2": "lift-2",
    "lower-3": "lift-3",
}

def find_blanks(s: Sequence[int]) -> List[int]:
    """Indices of blank cells, ascending."""
    return [i for i, v in enumerate(s) if v == 0]

def moves_for(p: int) -> List[str]:
    """Legal action labels for a blank sitting at index p."""
    out: List[str] = []
    if 0 < p < TRENCH_LEN: out.append("left")
    if p < TRENCH_LEN - 1: out.append("right")
    if p in _LIFT:         out.append(_LIFT[p])
    if p in _LOWER:        out.append(_LOWER[p])
    return out

def legal_moves(s: State) -> List[List[str]]:
    """One list of action labels per blank, in find_blanks order."""
    return [moves_for(p) for p in find_blanks(s)]

def move_target(p: int, action: str) -> int:
    """Index the blank at p swaps with when taking `action`."""
    if action == "left":
        return p - 1
    if action == "right":
        return p + 1
    if action in _VERTICAL:
        return _VERTICAL[action]
    raise ValueError(f"Unknown action: {action!r}")

def apply_move(s: State, blank_ordinal: int, action: str) -> State:
    """Move the `blank_ordinal`-th blank of s (find_blanks order) by `action`."""
    p = find_blanks(s)[blank_ordinal]
    q = move_target(p, action)
    lst = list(s)
    lst[p], lst[q] = lst[q], lst[p]
    return tuple(lst)

def successors(s: State) -> Iterator[Tuple[int, str, State]]:
    """Yield (blank_ordinal, action, next_state) in generation order."""
    for ordinal, actions in enumerate(legal_moves(s)):
        for a in actions:
            yield ordinal, a, apply_move(s, ordinal, a)

def neighbors(s: State) -> List[Tuple[State, int]]:
    """Return list of (next_state, cost) pairs with unit cost."""
    return [(s2, 1) for _, _, s2 in successors(s)]

def validate_state(values: Sequence[int]) -> State:
    """Check a user-supplied configuration and return it as a State.

    Exactly 13 integers: pieces 1..9 once each, every other cell blank (0).
    """
    if len(values) != SIZE:
        raise ValueError(f"Expected {SIZE} values (10 trench + 3 recess), got {len(values)}")
    try:
        s = tuple(int(v) for v in values)
    except (TypeError, ValueError):
        raise ValueError(f"Values must be integers: {list(values)!r}") from None
    pieces = sorted(v for v in s if v != 0)
    if pieces != list(range(1, 10)):
        raise ValueError(f"Pieces 1..9 must each appear exactly once, blanks as 0: {list(s)!r}")
    return s

def scramble(depth: int, seed: int, start: State = GOAL) -> State:
    """Random walk of `depth` state-changing moves from `start`, no immediate backtrack."""
    rng = random.Random(seed)
    s = start
    prev = None
    for _ in range(depth):
        cand = [s2 for _, _, s2 in successors(s) if s2 != s]
        if not cand:
            break
        if prev in cand and len(cand) > 1:
            cand.remove(prev)
        prev, s = s, rng.choice(cand)
    return s

def format_state(s: State) -> str:
    """Trench layout: recess values over trench columns 3, 5, 7."""
    top = "      " + "   ".join(str(v) for v in s[TRENCH_LEN:])
    bottom = " ".join(str(v) for v in s[:TRENCH_LEN])
    return f"{top}\n{bottom}"
