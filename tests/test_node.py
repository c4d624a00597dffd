from __future__ import annotations

import dataclasses

import pytest

from alphabeta import NEG_INF, POS_INF, NodeKind, SearchNode, finite


def test_kind_alternates_with_depth():
    assert [NodeKind.for_depth(d) for d in range(4)] == [
        NodeKind.MAXIMIZER,
        NodeKind.MINIMIZER,
        NodeKind.MAXIMIZER,
        NodeKind.MINIMIZER,
    ]
    assert NodeKind.MAXIMIZER.opposite is NodeKind.MINIMIZER
    assert NodeKind.MAXIMIZER.worst() == NEG_INF
    assert NodeKind.MINIMIZER.worst() == POS_INF


def test_root_and_child():
    root = SearchNode.root("start")
    assert root.is_root
    assert root.kind is NodeKind.MAXIMIZER
    assert root.move is None
    assert (root.alpha, root.beta) == (NEG_INF, POS_INF)

    child = root.child("next", "m", finite(1), finite(9))
    assert child.depth == 1
    assert child.kind is NodeKind.MINIMIZER
    assert child.value == POS_INF
    assert (child.position, child.move) == ("next", "m")
    assert (child.alpha, child.beta) == (finite(1), finite(9))
    # the parent is left untouched
    assert root.position == "start" and root.depth == 0


def test_nodes_are_frozen_and_kind_follows_depth():
    root = SearchNode.root(0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        root.value = finite(1)
    with pytest.raises(ValueError):
        dataclasses.replace(root, depth=1)
