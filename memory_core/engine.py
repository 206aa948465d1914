from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from . import moves
from .config import GameConfig
from .deal import DEFAULT_SYMBOLS, deal_tiles, layout_symbols, tiles_from_layout, validate_symbols
from .outcome import TurnOutcome
from .signals import game_changed, game_completed
from .state import Game, TurnPhase
from .tile import Symbol, Tile, TileId

logger = logging.getLogger(__name__)

Event = Union[str, TurnOutcome]  # 'new_game', 'unflip' or the outcome of a selection
Listener = Callable[..., None]  # listener(engine, event=...)


class GameEngine:
    """
    Owns the current Game and serializes every mutation behind one lock.

    select_tile() never waits: a mismatch returns a PendingUnflip intent and the
    caller invokes unflip() once its own timer fires. Each new game bumps the
    generation so that unflips scheduled for an earlier game do nothing.
    """

    def __init__(
        self,
        symbols: Sequence[Symbol] = DEFAULT_SYMBOLS,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self._config = config or GameConfig()
        self._lock = threading.RLock()
        values = validate_symbols(symbols)
        self._game = self._deal(values, deal_tiles(values, seed), generation=1)

    # ---------- mutators ----------

    def new_game(self, symbols: Optional[Sequence[Symbol]] = None, seed: Optional[int] = None) -> Game:
        """Replaces the current game with a freshly shuffled one."""
        with self._lock:
            values = validate_symbols(symbols) if symbols is not None else self._game.symbols
            self._game = self._deal(values, deal_tiles(values, seed), self._game.generation + 1)
            self._notify('new_game')
            return self._game

    def new_game_from_layout(self, layout: Sequence[Symbol]) -> Game:
        """Replaces the current game with one dealt in the given order."""
        with self._lock:
            tiles = tiles_from_layout(layout)
            self._game = self._deal(layout_symbols(layout), tiles, self._game.generation + 1)
            self._notify('new_game')
            return self._game

    def restart(self) -> Game:
        """New shuffle over the same symbol set."""
        return self.new_game()

    def select_tile(self, tile_id: TileId) -> Optional[TurnOutcome]:
        with self._lock:
            outcome = moves.select_tile(self._game, tile_id, self._config)
            if outcome is None:
                return None
            logger.debug(
                "tile %s -> %s (score %d, moves %d)",
                tile_id, outcome.kind, self._game.score, self._game.moves,
            )
            self._notify(outcome)
            if self._game.is_complete:
                logger.info(
                    "game %d complete: score %d in %d moves",
                    self._game.generation, self._game.score, self._game.moves,
                )
                game_completed.send(
                    self,
                    score=self._game.score,
                    moves=self._game.moves,
                    generation=self._game.generation,
                )
            return outcome

    def unflip(self, first: TileId, second: TileId, expected_generation: int) -> bool:
        with self._lock:
            changed = moves.unflip(self._game, first, second, expected_generation)
            if changed:
                self._notify('unflip')
            return changed

    # ---------- observers ----------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Connects listener(engine, event=...) to this engine's game_changed signal; returns an unsubscribe callable."""
        game_changed.connect(listener, sender=self, weak=False)

        def unsubscribe() -> None:
            game_changed.disconnect(listener, sender=self)

        return unsubscribe

    # ---------- read accessors ----------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        with self._lock:
            return tuple(self._game.tiles)

    @property
    def score(self) -> int:
        return self._game.score

    @property
    def moves(self) -> int:
        return self._game.moves

    @property
    def is_complete(self) -> bool:
        return self._game.is_complete

    @property
    def generation(self) -> int:
        return self._game.generation

    @property
    def pending_selection(self) -> Optional[TileId]:
        return self._game.pending

    @property
    def phase(self) -> TurnPhase:
        return self._game.phase

    @property
    def symbols(self) -> Tuple[Symbol, ...]:
        return self._game.symbols

    @property
    def matched_pairs(self) -> int:
        with self._lock:
            return self._game.matched_pairs

    def snapshot(self) -> Dict[str, Any]:
        """Consistent copy of the observable state."""
        with self._lock:
            g = self._game
            return {
                'tiles': tuple(g.tiles),
                'score': g.score,
                'moves': g.moves,
                'is_complete': g.is_complete,
                'generation': g.generation,
                'pending_selection': g.pending,
                'phase': g.phase,
            }

    # ---------- internals ----------

    def _deal(self, symbols: Tuple[Symbol, ...], tiles: List[Tile], generation: int) -> Game:
        logger.info("new game %d: %d pairs", generation, len(symbols))
        return Game(tiles=tiles, symbols=symbols, generation=generation)

    def _notify(self, event: Event) -> None:
        game_changed.send(self, event=event)
