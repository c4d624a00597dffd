from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..node import SearchNode
from ..search import search


@dataclass(frozen=True)
class Nim:
    """Single-heap Nim: each turn removes between one and ``max_take`` coins.

    The position is the heap size. An empty heap reached at an even depth
    scores ``win`` for the maximizer, at an odd depth ``loss``; positions cut
    off by the depth limit score ``undecided``.
    """

    max_take: int = 3
    win: int = 10
    loss: int = 0
    undecided: int = 5

    def apply_move(self, node: SearchNode[int, int], move: int) -> int:
        return node.position - move

    def legal_moves(self, node: SearchNode[int, int]) -> List[int]:
        return list(range(1, min(self.max_take, node.position) + 1))

    def evaluate(self, node: SearchNode[int, int]) -> int:
        if node.position == 0:
            return self.win if node.depth % 2 == 0 else self.loss
        return self.undecided

    def solve(self, heap: int, max_depth: int) -> SearchNode[int, int]:
        if heap < 0:
            raise ValueError(f"heap must be >= 0, got {heap}")
        return search(self.apply_move, self.evaluate, self.legal_moves, heap, max_depth)
