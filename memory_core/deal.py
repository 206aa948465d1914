from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .tile import Symbol, Tile

# Symbol set of the original game: 8 pairs, 16 tiles.
DEFAULT_SYMBOLS: Tuple[Symbol, ...] = ('🐶', '🐱', '🐭', '🐹', '🦊', '🐻', '🐼', '🐨')


def validate_symbols(symbols: Sequence[Symbol]) -> Tuple[Symbol, ...]:
    """Checks that a symbol set is non-empty and has no repeats."""
    values = tuple(symbols)
    if not values:
        raise ValueError('Invalid symbol set: expected at least one symbol')
    dupes = sorted(str(s) for s, n in Counter(values).items() if n > 1)
    if dupes:
        raise ValueError(f"Invalid symbol set: duplicate symbols {', '.join(dupes)}")
    return values


def tiles_from_layout(layout: Sequence[Symbol]) -> List[Tile]:
    """Builds face-down tiles in the given order; every symbol must appear exactly twice."""
    if not layout:
        raise ValueError('Invalid layout: expected at least one pair')
    bad = sorted(str(s) for s, n in Counter(layout).items() if n != 2)
    if bad:
        raise ValueError(f"Invalid layout: symbols not paired exactly twice: {', '.join(bad)}")
    return [Tile(id=i, symbol=s) for i, s in enumerate(layout)]


def deal_tiles(symbols: Sequence[Symbol], seed: Optional[int] = None) -> List[Tile]:
    """Creates two tiles per symbol and shuffles them uniformly."""
    values = validate_symbols(symbols)
    rng = random.Random(seed)
    deck: List[Symbol] = list(values) * 2
    rng.shuffle(deck)
    return tiles_from_layout(deck)


def layout_symbols(layout: Sequence[Symbol]) -> Tuple[Symbol, ...]:
    """Distinct symbols of a layout in first-seen order."""
    return tuple(dict.fromkeys(layout))
