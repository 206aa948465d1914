from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .tile import Symbol, Tile, TileId


def remember(seen: Dict[TileId, Symbol], tiles: Iterable[Tile]) -> None:
    """Records the symbols of currently visible, unresolved tiles; forgets matched ones."""
    for tile in tiles:
        if tile.matched:
            seen.pop(tile.id, None)
        elif tile.face_up:
            seen[tile.id] = tile.symbol


def ai_pick_tile(tiles: Sequence[Tile], seen: Dict[TileId, Symbol], pending: Optional[TileId]) -> Optional[TileId]:
    """Picks the next tile for a perfect-memory player, using only symbols it has seen face up."""
    selectable: List[TileId] = [t.id for t in tiles if not t.face_up and not t.matched]
    if not selectable:
        return None
    unseen = [tid for tid in selectable if tid not in seen]

    if pending is not None:
        wanted = tiles[pending].symbol
        for tid in selectable:
            if seen.get(tid) == wanted:
                return tid
        return unseen[0] if unseen else selectable[0]

    # Open a pair we already know, if any.
    by_symbol: Dict[Symbol, List[TileId]] = {}
    for tid in selectable:
        if tid in seen:
            by_symbol.setdefault(seen[tid], []).append(tid)
    for ids in by_symbol.values():
        if len(ids) >= 2:
            return ids[0]
    return unseen[0] if unseen else selectable[0]
