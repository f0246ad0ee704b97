"""Discrete coordinate space the snake lives on."""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np  # type: ignore

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, cells: Iterable[Cell]) -> np.ndarray:
        """
        Boolean (height, width) mask, True where a cell is taken.
        Out-of-bounds cells are skipped.
        """
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                mask[y, x] = True
        return mask

    def free_cells(self, cells: Iterable[Cell]) -> List[Cell]:
        flat = np.flatnonzero(~self.occupancy(cells))
        return [(int(i % self.width), int(i // self.width)) for i in flat]
