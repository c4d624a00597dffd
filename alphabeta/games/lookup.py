from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence

from ..node import SearchNode


@dataclass(frozen=True)
class LookupTree:
    """A game tree spelled out as tables.

    Positions are strings and moves single characters; playing a move appends
    it to the position. ``children`` lists the moves available from each
    position (unlisted positions have none) and ``values`` scores positions.
    """

    children: Mapping[str, Sequence[str]]
    values: Mapping[str, int]

    def apply_move(self, node: SearchNode[str, str], move: str) -> str:
        return node.position + move

    def legal_moves(self, node: SearchNode[str, str]) -> List[str]:
        return list(self.children.get(node.position, ()))

    def evaluate(self, node: SearchNode[str, str]) -> int:
        return self.values[node.position]


_SAMPLE_CHILDREN: Dict[str, List[str]] = {
    "": ["0", "1"],
    "0": ["0", "1"],
    "00": ["0", "1"],
    "000": ["0", "1"],
    "001": ["0", "1"],
    "01": ["0", "1"],
    "010": ["0", "1"],
    "011": ["0", "1"],
    "1": ["0", "1", "2"],
    "10": ["0", "1"],
    "100": ["0", "1"],
    "101": ["0", "1"],
    "11": ["0"],
    "110": ["0", "1"],
    "12": ["0", "1", "2"],
    "120": ["0", "1"],
    "121": ["0", "1", "2"],
    # "122" has no moves and is scored where it stands.
}

_SAMPLE_VALUES: Dict[str, int] = {
    "": 0,
    "0": 3,
    "1": 5,
    "00": 1,
    "01": 6,
    "10": 4,
    "11": 7,
    "12": 2,
    "000": 3,
    "001": 8,
    "010": 2,
    "011": 5,
    "100": 6,
    "101": 4,
    "110": 9,
    "120": 1,
    "121": 7,
    "122": 1,
    "0000": 4,
    "0001": 6,
    "0010": 2,
    "0011": 9,
    "0100": 7,
    "0101": 5,
    "0110": 1,
    "0111": 8,
    "1000": 3,
    "1001": 8,
    "1010": 2,
    "1011": 1,
    "1100": 6,
    "1101": 2,
    "1200": 9,
    "1201": 0,
    "1210": 7,
    "1211": 3,
    "1212": 5,
}

SAMPLE_TREE = LookupTree(_SAMPLE_CHILDREN, _SAMPLE_VALUES)
