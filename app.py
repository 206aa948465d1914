from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        GameEngine,
        Mismatched,
        Opened,
        Tile,
        TurnOutcome,
        config_from_env,
        debug_enabled,
    )
except ImportError:
    from game import (  # type: ignore
        GameEngine,
        Mismatched,
        Opened,
        Tile,
        TurnOutcome,
        config_from_env,
        debug_enabled,
    )

logger = logging.getLogger(__name__)

app = Flask(__name__)

# One engine per process; its lock serializes requests from the threaded server.
ENGINE = GameEngine(config=config_from_env())


# ---------- JSON conversion ----------

def tile_to_json(t: Tile) -> Dict[str, Any]:
    visible = t.face_up or t.matched
    return {
        "id": int(t.id),
        "symbol": t.symbol if visible else None,
        "faceUp": bool(t.face_up),
        "matched": bool(t.matched),
    }


def state_to_json(engine: GameEngine) -> Dict[str, Any]:
    snap = engine.snapshot()
    cfg = engine.config
    return {
        "tiles": [tile_to_json(t) for t in snap["tiles"]],
        "score": snap["score"],
        "moves": snap["moves"],
        "isComplete": snap["is_complete"],
        "generation": snap["generation"],
        "pendingSelection": snap["pending_selection"],
        "phase": snap["phase"].value,
        "config": {
            "matchReward": cfg.match_reward,
            "mismatchPenalty": cfg.mismatch_penalty,
            "unflipDelayMs": cfg.unflip_delay_ms,
        },
    }


def outcome_to_json(outcome: Optional[TurnOutcome]) -> Optional[Dict[str, Any]]:
    if outcome is None:
        return None
    if isinstance(outcome, Opened):
        return {"kind": outcome.kind, "tiles": [outcome.tile_id]}
    out: Dict[str, Any] = {"kind": outcome.kind, "tiles": [outcome.first, outcome.second], "score": outcome.score}
    if isinstance(outcome, Mismatched):
        intent = outcome.pending_unflip
        out["pendingUnflip"] = {
            "tiles": [intent.first, intent.second],
            "delayMs": intent.delay_ms,
            "generation": intent.generation,
        }
    return out


def _int_field(body: Dict[str, Any], name: str) -> int:
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


def _error(message: str, status: int = 400) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), status


def _json_body() -> Optional[Dict[str, Any]]:
    """Request body as a JSON object; None when the body is some other JSON value."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object body required")
    symbols = body.get("symbols")
    seed = body.get("seed")
    if symbols is not None and (not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols)):
        return _error("symbols must be a list of strings")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return _error("seed must be an integer")
    try:
        ENGINE.new_game(symbols, seed=seed)
    except ValueError as e:
        logger.warning("rejected new game: %s", e)
        return _error(str(e))
    return jsonify({"ok": True, "state": state_to_json(ENGINE)})


@app.post("/api/new_from")
def api_new_from() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object body required")
    layout = body.get("layout")
    if not isinstance(layout, list) or not all(isinstance(s, str) for s in layout):
        return _error("layout required")
    try:
        ENGINE.new_game_from_layout(layout)
    except ValueError as e:
        logger.warning("rejected layout: %s", e)
        return _error(f"bad layout: {e}")
    return jsonify({"ok": True, "state": state_to_json(ENGINE)})


@app.post("/api/restart")
def api_restart() -> Any:
    ENGINE.restart()
    return jsonify({"ok": True, "state": state_to_json(ENGINE)})


@app.get("/api/state")
def api_state() -> Any:
    return jsonify({"ok": True, "state": state_to_json(ENGINE)})


@app.post("/api/select")
def api_select() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object body required")
    try:
        tile_id = _int_field(body, "tileId")
    except ValueError as e:
        return _error(str(e))
    outcome = ENGINE.select_tile(tile_id)
    return jsonify({"ok": True, "outcome": outcome_to_json(outcome), "state": state_to_json(ENGINE)})


@app.post("/api/unflip")
def api_unflip() -> Any:
    body = _json_body()
    if body is None:
        return _error("JSON object body required")
    tiles = body.get("tiles")
    if (
        not isinstance(tiles, list)
        or len(tiles) != 2
        or any(isinstance(t, bool) or not isinstance(t, int) for t in tiles)
    ):
        return _error("tiles must be a list of two tile ids")
    try:
        generation = _int_field(body, "generation")
    except ValueError as e:
        return _error(str(e))
    changed = ENGINE.unflip(tiles[0], tiles[1], generation)
    return jsonify({"ok": True, "changed": changed, "state": state_to_json(ENGINE)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if (debug or debug_enabled()) else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
