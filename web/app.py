from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from flask import Flask, Response, jsonify, request
import chess

from alphabeta import ExtendedInt, SearchNode, SearchStats, search
from alphabeta.games import SAMPLE_TREE, ChessGame, Nim


DEFAULTS: Dict[str, Any] = {
    "DEFAULT_DEPTH": 3,
    "MAX_DEPTH": 6,
    "CHESS_MAX_DEPTH": 3,
}


def _value_json(value: ExtendedInt) -> Union[int, str]:
    return int(value) if value.is_finite else str(value)


def _int_field(payload: Mapping[str, Any], name: str, default: Optional[int] = None) -> int:
    raw = payload.get(name, default)
    if raw is None:
        raise ValueError(f"Missing {name}")
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    # digit strings such as "4" or "-1" are accepted, floats are not
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            pass
    raise ValueError(f"{name} must be an integer")


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    if test_config is None:
        app.config.from_prefixed_env("ALPHABETA")
    else:
        app.config.from_mapping(test_config)

    nim = Nim()

    def requested_depth(payload: Mapping[str, Any], limit_key: str = "MAX_DEPTH") -> int:
        depth = _int_field(payload, "depth", app.config["DEFAULT_DEPTH"])
        limit = app.config[limit_key]
        if depth > limit:
            raise ValueError(f"depth must be <= {limit}")
        return depth

    def respond(result: SearchNode, stats: SearchStats, move: Optional[Union[int, str]]) -> Response:
        return jsonify({"move": move, "value": _value_json(result.value), "nodes": stats.nodes})

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.post("/api/nim")
    def api_nim():
        payload = _json_payload()
        heap = _int_field(payload, "heap")
        if heap < 0:
            raise ValueError("heap must be >= 0")
        depth = requested_depth(payload)

        stats = SearchStats()
        result = search(nim.apply_move, nim.evaluate, nim.legal_moves, heap, depth, stats=stats)
        app.logger.info("nim heap=%d depth=%d -> move=%s value=%s", heap, depth, result.move, result.value)
        return respond(result, stats, result.move)

    @app.post("/api/tree")
    def api_tree():
        payload = _json_payload()
        depth = requested_depth(payload)

        stats = SearchStats()
        result = search(
            SAMPLE_TREE.apply_move, SAMPLE_TREE.evaluate, SAMPLE_TREE.legal_moves, "", depth, stats=stats
        )
        app.logger.info("tree depth=%d -> move=%s value=%s", depth, result.move, result.value)
        return respond(result, stats, result.move)

    @app.post("/api/chess")
    def api_chess():
        payload = _json_payload()
        fen = payload.get("fen")
        if fen is not None and not isinstance(fen, str):
            raise ValueError("fen must be a string")
        depth = requested_depth(payload, "CHESS_MAX_DEPTH")

        # chess.Board raises ValueError on a malformed FEN
        board = chess.Board(fen=fen) if fen else chess.Board()
        game = ChessGame(board.turn)

        stats = SearchStats()
        result = search(game.apply_move, game.evaluate, game.legal_moves, board, depth, stats=stats)
        move_uci = result.move.uci() if result.move is not None else None
        app.logger.info("chess fen=%s depth=%d -> move=%s value=%s", board.fen(), depth, move_uci, result.value)
        return respond(result, stats, move_uci)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
