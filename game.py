from __future__ import annotations

# Facade module that re-exports Memory Match core functionality.
# The Flask app and tests import from here; single-responsibility modules
# live under memory_core/*.

# Robust imports so this module works when executed as part of a package or
# imported directly. Prefer relative, then top-level.
try:
    from .memory_core.tile import Tile, TileId, Symbol, render_tiles  # type: ignore
    from .memory_core.state import Game, TurnPhase  # type: ignore
    from .memory_core.deal import (  # type: ignore
        DEFAULT_SYMBOLS,
        deal_tiles,
        tiles_from_layout,
        validate_symbols,
    )
    from .memory_core.outcome import (  # type: ignore
        Opened,
        Matched,
        Mismatched,
        PendingUnflip,
        TurnOutcome,
    )
    from .memory_core.config import GameConfig, config_from_env, debug_enabled  # type: ignore
    from .memory_core.moves import can_select, select_tile, unflip  # type: ignore
    from .memory_core.engine import GameEngine  # type: ignore
    from .memory_core.signals import game_changed, game_completed  # type: ignore
    from .memory_core.ai import ai_pick_tile, remember  # type: ignore
except ImportError:
    from memory_core.tile import Tile, TileId, Symbol, render_tiles  # type: ignore
    from memory_core.state import Game, TurnPhase  # type: ignore
    from memory_core.deal import (  # type: ignore
        DEFAULT_SYMBOLS,
        deal_tiles,
        tiles_from_layout,
        validate_symbols,
    )
    from memory_core.outcome import (  # type: ignore
        Opened,
        Matched,
        Mismatched,
        PendingUnflip,
        TurnOutcome,
    )
    from memory_core.config import GameConfig, config_from_env, debug_enabled  # type: ignore
    from memory_core.moves import can_select, select_tile, unflip  # type: ignore
    from memory_core.engine import GameEngine  # type: ignore
    from memory_core.signals import game_changed, game_completed  # type: ignore
    from memory_core.ai import ai_pick_tile, remember  # type: ignore


def main() -> None:
    # CLI driver delegated to memory_core.cli
    try:
        from .memory_core.cli import main as _main  # type: ignore
    except ImportError:
        from memory_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
