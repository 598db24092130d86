from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

State = Tuple[int, ...]
Action = Tuple[int, str]  # (blank ordinal, action label)

@dataclass
class Node:
    state: State
    parent: Optional["Node"] = field(default=None, repr=False, compare=False)
    action: Optional[Action] = None
    path_cost: int = 0
    heuristic: int = 0

    @property
    def f(self) -> int:
        return self.path_cost + self.heuristic

def reconstruct_path(node: Optional[Node]) -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return path

def solution_actions(node: Node) -> List[Action]:
    """Actions from the root to `node`; empty for the root itself."""
    actions: List[Action] = []
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)  # type: ignore[arg-type]
        cur = cur.parent
    actions.reverse()
    return actions
