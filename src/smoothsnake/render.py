from typing import List, Optional, Tuple

import pygame  # type: ignore

from .config import BG, GREEN, RED, TEXT, Config
from .game import GameState

Rect = Tuple[float, float, float, float]


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def interpolation_fraction(state: GameState, cfg: Config, now_ms: float) -> float:
    """
    How far the current frame sits between the last tick and the next one.
    Always 1.0 without smoothing; clamped to [0, 1] unless the config says
    to keep the overshoot of a late tick.
    """
    if not cfg.smooth:
        return 1.0
    t = (now_ms - state.last_tick_ms) / cfg.tick_interval_ms
    if cfg.clamp_interpolation:
        t = min(1.0, max(0.0, t))
    return t


def segment_rects(state: GameState, cfg: Config, t: float) -> List[Rect]:
    """
    Pixel rectangles for every snake segment, in draw order.

    Each segment with a previous position is drawn at the interpolated
    position; body segments (not the head) are drawn at their exact cell too.
    """
    size = cfg.cell_size
    rects: List[Rect] = []
    for i, (x, y) in enumerate(state.snake):
        if i < len(state.previous_snake):
            px, py = state.previous_snake[i]
            rects.append((lerp(px, x, t) * size, lerp(py, y, t) * size, size, size))
        if i != 0:
            rects.append((x * size, y * size, size, size))
    return rects


def draw_cell(screen: pygame.Surface, rect: Rect, color: Tuple[int, int, int]) -> None:
    x, y, w, h = rect
    pygame.draw.rect(screen, color, pygame.Rect(round(x), round(y), round(w), round(h)))


def draw_game(
    screen: pygame.Surface,
    state: GameState,
    cfg: Config,
    now_ms: float,
    font: Optional[pygame.font.Font] = None,
) -> None:
    screen.fill(BG)
    # apple
    ax, ay = state.apple
    draw_cell(screen, (ax * cfg.cell_size, ay * cfg.cell_size, cfg.cell_size, cfg.cell_size), RED)
    # snake
    for rect in segment_rects(state, cfg, interpolation_fraction(state, cfg, now_ms)):
        draw_cell(screen, rect, GREEN)
    # score
    if font is not None:
        txt = font.render(f"Score: {state.score}", True, TEXT)
        screen.blit(txt, (8, 6))
