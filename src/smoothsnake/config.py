from dataclasses import dataclass
from typing import Optional
import math

# ----- Grid defaults -----
GRID_W, GRID_H = 25, 25
CELL_SIZE = 20
STARTING_LENGTH = 3

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 128, 0)
RED   = (255, 0, 0)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)


# ----- Tunables (live-adjustable ones marked) -----
@dataclass
class Config:
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    cell_size: int = CELL_SIZE
    starting_length: int = STARTING_LENGTH
    speed: float = 10.0               # ticks per second (live)
    min_speed: float = 1.0
    max_speed: float = 30.0
    smooth: bool = True               # interpolate between ticks (live)
    queueing: bool = True             # allow one queued turn per tick
    clamp_interpolation: bool = True
    fps: int = 60
    seed: Optional[int] = None
    dense_threshold: float = 0.5      # occupancy above which apples are enumerated

    def __post_init__(self):
        if self.starting_length < 1:
            raise ValueError("starting_length must be at least 1")
        # the starting line runs left from the centre cell and must leave room for an apple
        fits = self.grid_w // 2 >= self.starting_length - 1 and self.grid_w > self.starting_length
        if not fits or self.grid_h < 1:
            raise ValueError(
                f"grid {self.grid_w}x{self.grid_h} too small for a snake of "
                f"length {self.starting_length}"
            )
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if not 0 < self.min_speed <= self.max_speed:
            raise ValueError("speed range must satisfy 0 < min_speed <= max_speed")
        self.set_speed(self.speed)
        if self.fps <= 0:
            raise ValueError("fps must be positive")

    @property
    def width_px(self) -> int:
        return self.grid_w * self.cell_size

    @property
    def height_px(self) -> int:
        return self.grid_h * self.cell_size

    @property
    def tick_interval_ms(self) -> float:
        return 1000.0 / self.speed

    def set_speed(self, value: float) -> float:
        """Set ticks-per-second, clamped to [min_speed, max_speed]. Returns the applied value."""
        _check_speed(value)
        self.speed = min(self.max_speed, max(self.min_speed, float(value)))
        return self.speed

    def step_speed(self, delta: float) -> float:
        """Nudge the speed by delta ticks-per-second, staying inside [min_speed, max_speed]."""
        return self.set_speed(max(self.min_speed, self.speed + delta))


def _check_speed(value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"speed must be a finite number > 0, got {value!r}")
