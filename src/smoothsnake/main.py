# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import Config
from .game import new_game_state, handle_input, step_game
from .render import draw_game


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="smoothsnake", description="Grid snake with smooth movement.")
    parser.add_argument("--speed", type=float, default=defaults.speed, help="ticks per second")
    parser.add_argument("--grid-width", type=int, default=defaults.grid_w)
    parser.add_argument("--grid-height", type=int, default=defaults.grid_h)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="pixels per grid cell")
    parser.add_argument(
        "--smooth",
        action=argparse.BooleanOptionalAction,
        default=defaults.smooth,
        help="interpolate segment positions between ticks",
    )
    parser.add_argument(
        "--no-queue",
        action="store_true",
        help="drop turns pressed after the first one in a tick instead of queueing one",
    )
    parser.add_argument(
        "--no-clamp",
        action="store_true",
        help="let interpolation overshoot when a tick runs late",
    )
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        grid_w=args.grid_width,
        grid_h=args.grid_height,
        cell_size=args.cell_size,
        speed=args.speed,
        smooth=args.smooth,
        queueing=not args.no_queue,
        clamp_interpolation=not args.no_clamp,
        fps=args.fps,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        raise SystemExit(f"smoothsnake: {e}")

    print(f"Snake {cfg.grid_w}x{cfg.grid_h} @ {cfg.speed:g} ticks/s  (arrows move, r reset, +/- speed, s smooth)")

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.width_px, cfg.height_px))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    state = new_game_state(cfg, pygame.time.get_ticks())
    running = True

    while running:
        # 1) input
        running = handle_input(state, cfg)
        if not running:
            break

        # 2) update (gated on the tick interval)
        now = pygame.time.get_ticks()
        step_game(state, cfg, now)

        # 3) render
        draw_game(screen, state, cfg, now, font)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
