from __future__ import annotations

import argparse
import logging
import time
from typing import Dict, List, Optional, Sequence

from .ai import ai_pick_tile, remember
from .config import GameConfig, config_from_env, debug_enabled
from .deal import DEFAULT_SYMBOLS
from .engine import GameEngine
from .outcome import Matched, Mismatched, Opened, TurnOutcome
from .tile import Symbol, TileId, render_tiles


def _parse_symbols(args: argparse.Namespace) -> Sequence[Symbol]:
    if args.symbols:
        return [s.strip() for s in args.symbols.split(',') if s.strip() != '']
    if args.pairs is not None:
        if not 1 <= args.pairs <= len(DEFAULT_SYMBOLS):
            raise SystemExit(f"--pairs must be between 1 and {len(DEFAULT_SYMBOLS)}")
        return DEFAULT_SYMBOLS[:args.pairs]
    return DEFAULT_SYMBOLS


def _build_config(args: argparse.Namespace) -> GameConfig:
    base = config_from_env()
    return GameConfig(
        match_reward=base.match_reward if args.reward is None else args.reward,
        mismatch_penalty=base.mismatch_penalty if args.penalty is None else args.penalty,
        unflip_delay_ms=base.unflip_delay_ms if args.delay_ms is None else args.delay_ms,
    )


def describe(outcome: TurnOutcome) -> str:
    if isinstance(outcome, Opened):
        return f"Opened tile {outcome.tile_id}"
    if isinstance(outcome, Matched):
        return f"Match! tiles {outcome.first} and {outcome.second} (score {outcome.score})"
    if isinstance(outcome, Mismatched):
        return f"No match: tiles {outcome.first} and {outcome.second} (score {outcome.score})"
    return str(outcome)


def _print_status(engine: GameEngine, columns: int) -> None:
    print(render_tiles(engine.tiles, columns))
    print(f"Score: {engine.score}  Moves: {engine.moves}  Pairs: {engine.matched_pairs}/{len(engine.symbols)}")


def autoplay(engine: GameEngine, columns: int, quiet: bool = False) -> None:
    """Lets the perfect-memory player finish the current game."""
    seen: Dict[TileId, Symbol] = {}
    while not engine.is_complete:
        pick = ai_pick_tile(engine.tiles, seen, engine.pending_selection)
        if pick is None:
            break
        outcome = engine.select_tile(pick)
        remember(seen, engine.tiles)
        if outcome is None:
            continue
        if not quiet:
            print(describe(outcome))
        if isinstance(outcome, Mismatched):
            intent = outcome.pending_unflip
            engine.unflip(intent.first, intent.second, intent.generation)
    if not quiet:
        _print_status(engine, columns)


def _play_interactive(engine: GameEngine, columns: int) -> None:
    print('Enter a tile number to flip it, r to restart, q to quit.')
    _print_status(engine, columns)
    while not engine.is_complete:
        text = input('Tile: ').strip().lower()
        if text in ('q', 'quit', 'exit'):
            return
        if text in ('r', 'restart'):
            engine.restart()
            _print_status(engine, columns)
            continue
        try:
            tile_id = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        outcome = engine.select_tile(tile_id)
        if outcome is None:
            print('That tile cannot be flipped. Try again.')
            continue
        print(describe(outcome))
        if isinstance(outcome, Opened):
            print(render_tiles(engine.tiles, columns))
        else:
            print(render_tiles(engine.tiles, columns, highlight={outcome.first, outcome.second}))
        if isinstance(outcome, Mismatched):
            intent = outcome.pending_unflip
            time.sleep(intent.delay_ms / 1000.0)
            engine.unflip(intent.first, intent.second, intent.generation)
            _print_status(engine, columns)
    print(f"All pairs found! Score {engine.score} in {engine.moves} moves.")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Memory Match: find all the pairs')
    parser.add_argument('--symbols', default=None, help='Comma-separated symbol set, e.g. A,B,C')
    parser.add_argument('--pairs', type=int, default=None, help='Use the first N default symbols')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the shuffle')
    parser.add_argument('--columns', type=int, default=4, help='Grid columns when printing')
    parser.add_argument('--reward', type=int, default=None, help='Points for a match')
    parser.add_argument('--penalty', type=int, default=None, help='Points lost for a mismatch')
    parser.add_argument('--delay-ms', type=int, default=None, help='How long mismatched tiles stay visible')
    parser.add_argument('--autoplay', action='store_true', help='Let a perfect-memory player finish the game')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)
    if args.columns < 1:
        parser.error('--columns must be positive')

    verbose = args.verbose or debug_enabled()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    try:
        engine = GameEngine(_parse_symbols(args), config=_build_config(args), seed=args.seed)
    except ValueError as e:
        parser.error(str(e))
        return

    if args.autoplay:
        autoplay(engine, args.columns)
        print(f"Finished with score {engine.score} in {engine.moves} moves.")
        return
    _play_interactive(engine, args.columns)


if __name__ == '__main__':
    main()
