"""Generic minimax search with alpha-beta pruning.

Modules:
- extended: Integers extended with exact negative and positive infinity
- node: Search tree nodes and the maximizer/minimizer alternation
- search: Depth-limited minimax, pruned and unpruned
- games: Example games that supply the search callbacks
"""

from .extended import NEG_INF, POS_INF, ExtendedInt, finite
from .node import NodeKind, SearchNode
from .search import SearchStats, minimax, search

__all__ = [
    "ExtendedInt",
    "NEG_INF",
    "POS_INF",
    "finite",
    "NodeKind",
    "SearchNode",
    "SearchStats",
    "minimax",
    "search",
]
