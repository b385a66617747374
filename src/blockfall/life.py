"""Conway's Game of Life on a wrapping grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .config import MIN_LIFE_SIZE

Cells = NDArray[np.uint8]


@dataclass(eq=False)
class Universe:
    """A ``width x height`` universe stored as a flat row-major array."""

    width: int
    height: int
    area: Cells

    def __post_init__(self) -> None:
        if self.width < MIN_LIFE_SIZE or self.height < MIN_LIFE_SIZE:
            raise ValueError(
                f"Universe must be at least {MIN_LIFE_SIZE}x{MIN_LIFE_SIZE} cells, "
                f"got {self.width}x{self.height}"
            )
        self.area = np.asarray(self.area, dtype=np.uint8).reshape(-1)
        if self.area.size != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells, got {self.area.size}"
            )

    @classmethod
    def new(cls, width: int, height: int) -> "Universe":
        """Return a universe seeded with a fixed, irregular pattern."""

        index = np.arange(width * height)
        area = ((index % 2 == 0) | (index % 7 == 0)).astype(np.uint8)
        return cls(width, height, area)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Universe":
        grid = np.array([list(row) for row in rows], dtype=np.uint8)
        height, width = grid.shape
        return cls(width, height, grid.reshape(-1))

    def get_index(self, row: int, column: int) -> int:
        return row * self.width + column

    def is_alive(self, row: int, column: int) -> bool:
        return bool(self.area[self.get_index(row, column)])

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count the live cells around ``(row, column)``.

        The universe wraps at its edges.  Offsets of ``height - 1`` and
        ``width - 1`` stand for -1 so the arithmetic stays non-negative.
        """

        count = 0
        for delta_row in (self.height - 1, 0, 1):
            for delta_col in (self.width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor_row = (row + delta_row) % self.height
                neighbor_col = (column + delta_col) % self.width
                count += int(self.area[self.get_index(neighbor_row, neighbor_col)])
        return count

    def tick(self) -> None:
        """Advance the universe by one generation."""

        grid = self.area.reshape(self.height, self.width)
        neighbors = self.neighbor_counts()
        alive = grid != 0
        survives = alive & ((neighbors == 2) | (neighbors == 3))
        born = ~alive & (neighbors == 3)
        self.area = (survives | born).astype(np.uint8).reshape(-1)

    def neighbor_counts(self) -> NDArray[np.int16]:
        """Return the live neighbour count of every cell as a 2D grid.

        Each of the eight shifted copies wraps at the edges, matching
        :meth:`live_neighbor_count`.
        """

        grid = self.area.reshape(self.height, self.width).astype(np.int16)
        counts = np.zeros_like(grid)
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                counts += np.roll(grid, (delta_row, delta_col), axis=(0, 1))
        return counts

    def population(self) -> int:
        return int(np.count_nonzero(self.area))

    def render(self) -> str:
        rows = self.area.reshape(self.height, self.width)
        return "\n".join("".join("#" if cell else "." for cell in row) for row in rows)

    def __str__(self) -> str:
        return self.render()
