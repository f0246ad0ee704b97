# game.py
from dataclasses import dataclass, field
from typing import Iterable, Optional, Set
import logging
import random

import pygame  # type: ignore

from .apple import BoardFullError, spawn_apple
from .arbiter import Direction, DirectionArbiter
from .config import Config, UP, DOWN, LEFT, RIGHT
from .grid import Cell, Grid
from .snake import Snake, StepResult, collides, initial_snake, move

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
RESET_KEY = pygame.K_r
SMOOTH_KEY = pygame.K_s
FASTER_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SLOWER_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


# ---------- State ----------
@dataclass
class GameState:
    grid: Grid
    starting_length: int
    snake: Snake                   # head at index 0
    previous_snake: Snake          # positions one tick ago, for interpolation
    apple: Cell
    arbiter: DirectionArbiter
    rng: random.Random
    last_tick_ms: float            # timestamp of the last tick
    dense_threshold: float = 0.5
    held_keys: Set[int] = field(default_factory=set)

    @property
    def score(self) -> int:
        return len(self.snake) - self.starting_length

    @property
    def direction(self) -> Direction:
        return self.arbiter.active


def new_game_state(cfg: Config, now_ms: float = 0) -> GameState:
    grid = Grid(cfg.grid_w, cfg.grid_h)
    rng = random.Random(cfg.seed)
    snake = initial_snake(grid, cfg.starting_length)
    return GameState(
        grid=grid,
        starting_length=cfg.starting_length,
        snake=snake,
        previous_snake=list(snake),
        apple=spawn_apple(snake, grid, rng, cfg.dense_threshold),
        arbiter=DirectionArbiter(queueing=cfg.queueing),
        rng=rng,
        last_tick_ms=now_ms,
        dense_threshold=cfg.dense_threshold,
    )


def restart(state: GameState, reason: str = "reset") -> None:
    """Put snake, direction and apple back to their initial configuration."""
    logger.info("restart (%s), score was %d", reason, state.score)
    state.snake = initial_snake(state.grid, state.starting_length)
    state.previous_snake = list(state.snake)
    state.arbiter.reset()
    state.apple = spawn_apple(state.snake, state.grid, state.rng, state.dense_threshold)


# ---------- Update ----------
def advance(state: GameState, direction: Direction) -> StepResult:
    """
    Move the snake one cell in direction, growing on the apple and
    restarting on a wall or self collision.
    """
    state.snake, old_tail = move(state.snake, direction)
    new_head = state.snake[0]

    ate = new_head == state.apple
    if ate:
        state.snake.append(old_tail)
        try:
            state.apple = spawn_apple(state.snake, state.grid, state.rng, state.dense_threshold)
        except BoardFullError:
            restart(state, "board full")
            return StepResult(new_head, ate_apple=True, collided=False)

    if collides(state.snake, state.grid):
        reason = "wall" if not state.grid.in_bounds(new_head) else "self"
        restart(state, reason)
        return StepResult(new_head, ate_apple=ate, collided=True)

    return StepResult(new_head, ate_apple=ate, collided=False)


def tick(state: GameState, now_ms: float) -> StepResult:
    """One simulation step, regardless of timing."""
    state.previous_snake = list(state.snake)
    result = advance(state, state.arbiter.active)
    state.arbiter.commit()
    state.last_tick_ms = now_ms
    return result


def step_game(state: GameState, cfg: Config, now_ms: float) -> Optional[StepResult]:
    """
    Advance the game if a full tick interval (1000 / speed ms) has passed
    since the last tick. Returns the step result, or None if not yet due.
    """
    if now_ms - state.last_tick_ms < cfg.tick_interval_ms:
        return None
    return tick(state, now_ms)


# ---------- Input ----------
def handle_key(state: GameState, cfg: Config, key: int) -> None:
    if key in KEY_DIRECTIONS:
        state.arbiter.request(KEY_DIRECTIONS[key])
    elif key == RESET_KEY:
        restart(state)
    elif key == SMOOTH_KEY:
        cfg.smooth = not cfg.smooth
        logger.info("smooth rendering %s", "on" if cfg.smooth else "off")
    elif key in FASTER_KEYS:
        logger.info("speed %.0f ticks/s", cfg.step_speed(1))
    elif key in SLOWER_KEYS:
        logger.info("speed %.0f ticks/s", cfg.step_speed(-1))


def handle_input(
    state: GameState,
    cfg: Config,
    events: Optional[Iterable[pygame.event.Event]] = None,
) -> bool:
    """Process events; auto-repeated key downs are ignored. Return False to quit."""
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYUP:
            state.held_keys.discard(event.key)
        elif event.type == pygame.KEYDOWN:
            if event.key in state.held_keys:
                continue  # key repeat
            state.held_keys.add(event.key)
            handle_key(state, cfg, event.key)
    return True
