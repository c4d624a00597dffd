"""Example games supplying ``apply_move``, ``evaluate`` and ``legal_moves``."""

from .chess_game import ChessGame
from .lookup import SAMPLE_TREE, LookupTree
from .nim import Nim

__all__ = ["ChessGame", "LookupTree", "Nim", "SAMPLE_TREE"]
