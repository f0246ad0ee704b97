from dataclasses import dataclass
from typing import Optional, Tuple

from .config import RIGHT

Direction = Tuple[int, int]


def is_perpendicular(a: Direction, b: Direction) -> bool:
    """True when a and b lie on different axes (dot product is zero)."""
    return a[0] * b[0] + a[1] * b[1] == 0


@dataclass
class DirectionArbiter:
    """
    Decides which key press steers which tick.

    active     - direction the next tick moves in
    last_used  - direction of the last tick, or None once a turn has been
                 taken since then (further turns must wait)
    queued     - at most one turn held over to the following tick
    """
    active: Direction = RIGHT
    last_used: Optional[Direction] = RIGHT
    queued: Optional[Direction] = None
    queueing: bool = True

    def request(self, direction: Direction) -> bool:
        """Handle a (non-repeat) direction key. Returns True if it was accepted."""
        if self.last_used is not None:
            if is_perpendicular(direction, self.last_used):
                self.active = direction
                self.last_used = None
                return True
            return False

        if self.queueing and is_perpendicular(direction, self.active):
            self.queued = direction
            return True
        return False

    def commit(self) -> None:
        """Called once per tick, after the snake has moved."""
        self.last_used = self.active
        if self.queued is not None:
            self.active = self.queued
            self.queued = None

    def reset(self) -> None:
        self.active = RIGHT
        self.last_used = RIGHT
        self.queued = None
