"""Grid snake with a fixed-tick simulation and interpolated rendering."""

from .config import Config, UP, DOWN, LEFT, RIGHT
from .game import GameState, new_game_state, restart, advance, tick, step_game, handle_input
from .apple import BoardFullError, spawn_apple

__all__ = [
    "Config", "UP", "DOWN", "LEFT", "RIGHT",
    "GameState", "new_game_state", "restart", "advance", "tick", "step_game", "handle_input",
    "BoardFullError", "spawn_apple",
]
