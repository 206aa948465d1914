"""
Memory Match core Python package.

This package holds the game-state engine for the matching-pairs card game.
Presentation layers (the Flask app, the terminal CLI) only read engine state
and forward tile selections.
Modules:
- tile.py: Tile, TileId, Symbol, render_tiles
- state.py: Game, TurnPhase
- deal.py: DEFAULT_SYMBOLS, deal_tiles, tiles_from_layout
- outcome.py: Opened, Matched, Mismatched, PendingUnflip
- config.py: GameConfig, config_from_env
- moves.py: turn rules (select_tile, unflip)
- engine.py: GameEngine
- cli.py: terminal game
"""
