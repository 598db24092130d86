from __future__ import annotations
from typing import List, Tuple
import heapq
import itertools

from trench.search.node import Node

TIE_BREAKS = ("h", "g", "fifo", "lifo")

class Frontier:
    """Min-heap of Nodes by f = g + h.

    Ties on f are broken by `tie_break`, then by insertion counter, so the pop
    order is fully deterministic for a given run. Equal states may be queued
    more than once.
    """
    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], Node]] = []
        self._counter = itertools.count()

    def _priority(self, node: Node) -> Tuple[int, int, int]:
        f, g, h, ctr = node.f, node.path_cost, node.heuristic, next(self._counter)
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self._priority(node), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
