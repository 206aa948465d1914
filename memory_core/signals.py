from blinker import Namespace

_signals = Namespace()

# Signal fired after any change to an engine's game
# Arguments: sender (the GameEngine), event ('new_game', 'unflip' or a TurnOutcome)
game_changed = _signals.signal('game-changed')

# Signal fired when the last pair of a game is found
# Arguments: sender (the GameEngine), score, moves, generation
game_completed = _signals.signal('game-completed')
