from __future__ import annotations

from typing import Dict, List

import chess

from ..node import SearchNode
from ..search import search


class ChessGame:
    """Chess callbacks for the search engine, on top of python-chess.

    ``color`` is the side the search plays for (the maximizer). Scores are
    computed in centipawns from White's point of view and flipped for Black.
    """

    MATERIAL_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 100,
        chess.KNIGHT: 320,
        chess.BISHOP: 330,
        chess.ROOK: 500,
        chess.QUEEN: 900,
        chess.KING: 0,
    }
    MATE_SCORE = 100000
    MOBILITY_WEIGHT = 2

    def __init__(self, color: chess.Color = chess.WHITE) -> None:
        self.color = color

    def apply_move(self, node: SearchNode[chess.Board, chess.Move], move: chess.Move) -> chess.Board:
        board = node.position.copy(stack=False)
        board.push(move)
        return board

    def legal_moves(self, node: SearchNode[chess.Board, chess.Move]) -> List[chess.Move]:
        board = node.position
        if board.is_game_over():
            return []
        # Captures first so pruning kicks in sooner
        return sorted(board.legal_moves, key=lambda m: 1 if board.is_capture(m) else 0, reverse=True)

    def evaluate(self, node: SearchNode[chess.Board, chess.Move]) -> int:
        score = self.score_white(node.position)
        return score if self.color == chess.WHITE else -score

    @classmethod
    def score_white(cls, board: chess.Board) -> int:
        if board.is_checkmate():
            return -cls.MATE_SCORE if board.turn == chess.WHITE else cls.MATE_SCORE
        if board.is_stalemate() or board.is_insufficient_material():
            return 0

        score = 0
        for piece_type, piece_value in cls.MATERIAL_VALUES.items():
            score += piece_value * len(board.pieces(piece_type, chess.WHITE))
            score -= piece_value * len(board.pieces(piece_type, chess.BLACK))

        if not board.is_check():
            mobility = board.legal_moves.count()
            probe = board.copy(stack=False)
            probe.push(chess.Move.null())
            opponent_mobility = probe.legal_moves.count()
            if board.turn == chess.BLACK:
                mobility, opponent_mobility = opponent_mobility, mobility
            score += cls.MOBILITY_WEIGHT * (mobility - opponent_mobility)

        return score

    def best_move(self, board: chess.Board, max_depth: int) -> SearchNode[chess.Board, chess.Move]:
        if board.turn != self.color:
            raise ValueError("it is not the searching side's turn")
        return search(self.apply_move, self.evaluate, self.legal_moves, board.copy(), max_depth)
