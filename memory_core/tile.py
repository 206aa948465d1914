from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

TileId = int
Symbol = str


@dataclass(frozen=True)
class Tile:
    """One board position holding a single symbol instance."""
    id: TileId
    symbol: Symbol
    face_up: bool = False
    matched: bool = False

    def flipped(self, face_up: bool) -> 'Tile':
        return Tile(self.id, self.symbol, face_up, self.matched)

    def as_matched(self) -> 'Tile':
        # A matched tile is always shown face up.
        return Tile(self.id, self.symbol, True, True)


def render_tiles(
    tiles: Iterable[Tile],
    columns: int = 4,
    highlight: Optional[Set[TileId]] = None,
) -> str:
    """Generates a human-readable grid: face-down tiles show their id, face-up tiles their symbol."""
    if columns < 1:
        raise ValueError('columns must be positive')
    marks = highlight or set()
    cells: List[str] = []
    for tile in tiles:
        if tile.face_up or tile.matched:
            text = tile.symbol
        else:
            text = f"#{tile.id}"
        if tile.id in marks:
            text = f"[{text}]"
        cells.append(text)
    width = max((len(c) for c in cells), default=0)
    lines: List[str] = []
    for start in range(0, len(cells), columns):
        row = cells[start:start + columns]
        lines.append(" ".join(c.rjust(width) for c in row))
    return "\n".join(lines)
