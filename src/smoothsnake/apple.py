import logging
import random
from typing import Sequence

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when every cell is covered by the snake and no apple fits."""


def spawn_apple(
    snake: Sequence[Cell],
    grid: Grid,
    rng: random.Random,
    dense_threshold: float = 0.5,
) -> Cell:
    """
    Pick a uniformly random cell not covered by the snake.

    Sparse boards use rejection sampling. Once the snake covers at least
    dense_threshold of the grid the free cells are enumerated instead, so a
    nearly full board never spins.
    """
    occupied = set(snake)
    if len(occupied) >= grid.size:
        raise BoardFullError(f"no free cell left on a {grid.width}x{grid.height} grid")

    if len(occupied) / grid.size < dense_threshold:
        while True:
            cell = (rng.randrange(grid.width), rng.randrange(grid.height))
            if cell not in occupied:
                logger.debug("apple placed at %s (sampled)", cell)
                return cell

    free = grid.free_cells(occupied)
    if not free:
        raise BoardFullError(f"no free cell left on a {grid.width}x{grid.height} grid")
    cell = rng.choice(free)
    logger.debug("apple placed at %s (%d free cells)", cell, len(free))
    return cell
