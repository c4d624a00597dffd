from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Generic, Optional, Sequence, Tuple

from .extended import finite
from .node import Move, NodeKind, Position, SearchNode

logger = logging.getLogger(__name__)

ApplyMove = Callable[[SearchNode[Position, Move], Move], Position]
Evaluate = Callable[[SearchNode[Position, Move]], int]
LegalMoves = Callable[[SearchNode[Position, Move]], Sequence[Move]]


@dataclass
class SearchStats:
    """Work counters filled in by a search. Reusing an instance accumulates."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


class _Searcher(Generic[Position, Move]):
    """Depth-limited minimax over caller-supplied callbacks, optionally pruned."""

    def __init__(
        self,
        apply_move: ApplyMove,
        evaluate: Evaluate,
        legal_moves: LegalMoves,
        max_depth: int,
        prune: bool,
        stats: SearchStats,
    ) -> None:
        self.apply_move = apply_move
        self.evaluate = evaluate
        self.legal_moves = legal_moves
        self.max_depth = max_depth
        self.prune = prune
        self.stats = stats

    def run(self, initial_position: Position) -> SearchNode[Position, Move]:
        root: SearchNode[Position, Move] = SearchNode.root(initial_position)
        result, best_move = self._alphabeta(root)
        if result is None:
            # only reachable if the root starts with an empty window
            raise RuntimeError(f"root window ({root.alpha}, {root.beta}) cut off every move")
        return replace(result, move=best_move)

    def _alphabeta(
        self, node: SearchNode[Position, Move]
    ) -> Tuple[Optional[SearchNode[Position, Move]], Optional[Move]]:
        """Evaluate ``node`` and return it with its backed-up value.

        The second element is the move to the winning child, or ``None`` for
        a leaf. The node comes back as ``None`` only when every child was cut
        off before being expanded.
        """
        self.stats.nodes += 1

        if node.depth == self.max_depth:
            return self._leaf(node), None
        moves = list(self.legal_moves(node))
        if not moves:
            return self._leaf(node), None

        alpha, beta = node.alpha, node.beta
        best: Optional[SearchNode[Position, Move]] = None
        for index, move in enumerate(moves):
            if self.prune and not alpha < beta:
                self.stats.cutoffs += 1
                logger.debug(
                    "cutoff at depth %d after %d of %d moves (alpha=%s, beta=%s)",
                    node.depth, index, len(moves), alpha, beta,
                )
                break
            child = node.child(self.apply_move(node, move), move, alpha, beta)
            child, _ = self._alphabeta(child)
            if child is None:
                continue
            if best is None or _better(node.kind, child, best):
                best = child
            if node.kind is NodeKind.MAXIMIZER:
                alpha = max(alpha, child.alpha)
            else:
                beta = min(beta, child.beta)

        if best is None:
            return None, None
        return replace(node, value=best.value, alpha=best.alpha, beta=best.beta), best.move

    def _leaf(self, node: SearchNode[Position, Move]) -> SearchNode[Position, Move]:
        self.stats.leaves += 1
        value = finite(self.evaluate(node))
        return replace(node, value=value, alpha=value, beta=value)


def _better(kind: NodeKind, candidate: SearchNode, incumbent: SearchNode) -> bool:
    # Strict comparison keeps the earliest of equally valued children.
    if kind is NodeKind.MAXIMIZER:
        return candidate.value > incumbent.value
    return candidate.value < incumbent.value


def _check_depth(max_depth: int) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError(f"max_depth must be an int, got {type(max_depth).__name__}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")


def _run(
    apply_move: ApplyMove,
    evaluate: Evaluate,
    legal_moves: LegalMoves,
    initial_position: Position,
    max_depth: int,
    prune: bool,
    stats: Optional[SearchStats],
) -> SearchNode[Position, Move]:
    _check_depth(max_depth)
    stats = stats if stats is not None else SearchStats()
    logger.debug("starting %s search to depth %d", "alpha-beta" if prune else "minimax", max_depth)
    result = _Searcher(apply_move, evaluate, legal_moves, max_depth, prune, stats).run(initial_position)
    logger.debug(
        "search done: value=%s move=%r nodes=%d leaves=%d cutoffs=%d",
        result.value, result.move, stats.nodes, stats.leaves, stats.cutoffs,
    )
    return result


def search(
    apply_move: ApplyMove,
    evaluate: Evaluate,
    legal_moves: LegalMoves,
    initial_position: Position,
    max_depth: int,
    *,
    stats: Optional[SearchStats] = None,
) -> SearchNode[Position, Move]:
    """Minimax with alpha-beta pruning to a fixed depth.

    ``apply_move(node, move)`` returns the position reached by playing
    ``move`` from ``node``; ``evaluate(node)`` scores a leaf from the
    maximizer's point of view; ``legal_moves(node)`` lists the moves to try,
    in order. A node at ``max_depth``, or with no legal moves, is a leaf.

    Returns the root node carrying the backed-up value and, in ``move``, the
    best move (the earliest one among equally valued moves), or ``None``
    when the root is a leaf.
    """
    return _run(apply_move, evaluate, legal_moves, initial_position, max_depth, True, stats)


def minimax(
    apply_move: ApplyMove,
    evaluate: Evaluate,
    legal_moves: LegalMoves,
    initial_position: Position,
    max_depth: int,
    *,
    stats: Optional[SearchStats] = None,
) -> SearchNode[Position, Move]:
    """Plain minimax without pruning; same contract and result as :func:`search`."""
    return _run(apply_move, evaluate, legal_moves, initial_position, max_depth, False, stats)
