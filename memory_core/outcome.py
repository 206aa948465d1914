from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .tile import TileId


@dataclass(frozen=True)
class PendingUnflip:
    """Intent to flip two mismatched tiles back down after delay_ms.

    The caller owns the timer and later calls unflip(first, second, generation).
    """
    first: TileId
    second: TileId
    delay_ms: int
    generation: int


@dataclass(frozen=True)
class Opened:
    tile_id: TileId
    kind: str = 'opened'


@dataclass(frozen=True)
class Matched:
    first: TileId
    second: TileId
    score: int
    kind: str = 'matched'


@dataclass(frozen=True)
class Mismatched:
    first: TileId
    second: TileId
    score: int
    pending_unflip: PendingUnflip
    kind: str = 'mismatched'


TurnOutcome = Union[Opened, Matched, Mismatched]
