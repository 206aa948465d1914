from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tile import Symbol, Tile, TileId


class TurnPhase(enum.Enum):
    IDLE = 'idle'
    AWAITING_SECOND = 'awaiting_second'


@dataclass
class Game:
    """The aggregate root: the dealt tiles plus the per-game counters."""
    tiles: List[Tile]
    symbols: Tuple[Symbol, ...]
    generation: int = 0
    pending: Optional[TileId] = None  # face-up tile waiting for its partner
    score: int = 0
    moves: int = 0
    is_complete: bool = False

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.IDLE if self.pending is None else TurnPhase.AWAITING_SECOND

    def tile(self, tile_id: TileId) -> Optional[Tile]:
        # Ids are dense indices into tiles.
        if isinstance(tile_id, bool) or not isinstance(tile_id, int):
            return None
        if 0 <= tile_id < len(self.tiles):
            return self.tiles[tile_id]
        return None

    def replace_tile(self, tile: Tile) -> None:
        self.tiles[tile.id] = tile

    def all_matched(self) -> bool:
        return all(t.matched for t in self.tiles)

    @property
    def matched_pairs(self) -> int:
        return sum(1 for t in self.tiles if t.matched) // 2
