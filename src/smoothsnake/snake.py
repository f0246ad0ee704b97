from dataclasses import dataclass
from typing import List, Tuple

from .grid import Cell, Grid

Snake = List[Cell]


@dataclass(frozen=True)
class StepResult:
    new_head: Cell
    ate_apple: bool
    collided: bool


def initial_snake(grid: Grid, starting_length: int) -> Snake:
    """Straight line on the centre row, head at the centre, facing right."""
    cx, cy = grid.center
    return [(cx - i, cy) for i in range(starting_length)]


def move(snake: Snake, direction: Tuple[int, int]) -> Tuple[Snake, Cell]:
    """
    Follow-the-leader move: every segment takes its predecessor's cell and
    the head steps one cell in direction. Returns (moved snake, old tail).
    """
    hx, hy = snake[0]
    dx, dy = direction
    moved = [(hx + dx, hy + dy)] + snake[:-1]
    return moved, snake[-1]


def collides(snake: Snake, grid: Grid) -> bool:
    """Head off the grid, or head on any later segment."""
    head = snake[0]
    if not grid.in_bounds(head):
        return True
    return head in snake[1:]
