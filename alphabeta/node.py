from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Optional, TypeVar

from .extended import NEG_INF, POS_INF, ExtendedInt

Position = TypeVar("Position")
Move = TypeVar("Move")


class NodeKind(Enum):
    """Whose turn a node represents. Depth 0 is always the maximizer."""

    MAXIMIZER = "max"
    MINIMIZER = "min"

    @classmethod
    def for_depth(cls, depth: int) -> "NodeKind":
        return cls.MAXIMIZER if depth % 2 == 0 else cls.MINIMIZER

    @property
    def opposite(self) -> "NodeKind":
        return NodeKind.MINIMIZER if self is NodeKind.MAXIMIZER else NodeKind.MAXIMIZER

    def worst(self) -> ExtendedInt:
        """Starting value for a node of this kind; any real value replaces it."""
        return NEG_INF if self is NodeKind.MAXIMIZER else POS_INF


@dataclass(frozen=True)
class SearchNode(Generic[Position, Move]):
    """One node of the implicit search tree.

    Nodes are never mutated; the engine derives updated copies with
    ``dataclasses.replace``. After a search, the root's ``move`` holds the
    best move found (``None`` when no move was available).
    """

    kind: NodeKind
    position: Position
    move: Optional[Move]
    value: ExtendedInt
    alpha: ExtendedInt
    beta: ExtendedInt
    depth: int

    def __post_init__(self) -> None:
        if self.kind is not NodeKind.for_depth(self.depth):
            raise ValueError(f"{self.kind.name} node cannot sit at depth {self.depth}")

    @classmethod
    def root(cls, position: Position) -> "SearchNode[Position, Move]":
        return cls(
            kind=NodeKind.MAXIMIZER,
            position=position,
            move=None,
            value=NodeKind.MAXIMIZER.worst(),
            alpha=NEG_INF,
            beta=POS_INF,
            depth=0,
        )

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    def child(
        self,
        position: Position,
        move: Move,
        alpha: ExtendedInt,
        beta: ExtendedInt,
    ) -> "SearchNode[Position, Move]":
        kind = self.kind.opposite
        return replace(
            self,
            kind=kind,
            position=position,
            move=move,
            value=kind.worst(),
            alpha=alpha,
            beta=beta,
            depth=self.depth + 1,
        )
