from __future__ import annotations

import logging
from typing import Optional

from .config import GameConfig
from .outcome import Matched, Mismatched, Opened, PendingUnflip, TurnOutcome
from .state import Game
from .tile import TileId

logger = logging.getLogger(__name__)


def can_select(game: Game, tile_id: TileId) -> bool:
    """A tile can be selected if it exists and is neither face up nor matched."""
    tile = game.tile(tile_id)
    return tile is not None and not tile.matched and not tile.face_up


def select_tile(game: Game, tile_id: TileId, config: GameConfig) -> Optional[TurnOutcome]:
    """
    Applies one tile selection to the game in place.

    The first selection of a turn opens the tile. The second resolves the turn:
    a match marks both tiles and adds the reward, a mismatch subtracts the
    penalty (never below zero) and returns an unflip intent for the caller to
    schedule. Selections of unknown, face-up or matched tiles are ignored and
    return None.
    """
    if not can_select(game, tile_id):
        logger.debug("ignored selection of tile %r (generation %d)", tile_id, game.generation)
        return None

    chosen = game.tiles[tile_id]
    if game.pending is None:
        game.replace_tile(chosen.flipped(True))
        game.pending = tile_id
        return Opened(tile_id)

    first = game.tiles[game.pending]
    game.pending = None
    game.moves += 1
    game.replace_tile(chosen.flipped(True))

    outcome: TurnOutcome
    if first.symbol == chosen.symbol:
        game.replace_tile(first.as_matched())
        game.replace_tile(game.tiles[tile_id].as_matched())
        game.score += config.match_reward
        outcome = Matched(first.id, tile_id, game.score)
    else:
        game.score = max(0, game.score - config.mismatch_penalty)
        intent = PendingUnflip(first.id, tile_id, config.unflip_delay_ms, game.generation)
        outcome = Mismatched(first.id, tile_id, game.score, intent)

    if game.all_matched():
        game.is_complete = True
    return outcome


def unflip(game: Game, first: TileId, second: TileId, expected_generation: int) -> bool:
    """
    Turns the two tiles of a mismatch face down again.

    A stale generation makes this a no-op. Matched or already face-down tiles
    and unknown ids are left alone. Returns whether any tile changed.
    """
    if expected_generation != game.generation:
        logger.debug(
            "stale unflip of %r,%r (generation %r, current %d)",
            first, second, expected_generation, game.generation,
        )
        return False
    changed = False
    for tile_id in (first, second):
        tile = game.tile(tile_id)
        if tile is None or tile.matched or not tile.face_up:
            continue
        # A face-up pending tile belongs to the current turn.
        if game.pending == tile_id:
            continue
        game.replace_tile(tile.flipped(False))
        changed = True
    return changed
