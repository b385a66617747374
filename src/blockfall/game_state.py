"""Grid of settled cells and the collision checks against it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .config import CANVAS_SIZE
from .piece import Piece
from .shapes import Shape, shape_cells

Grid = NDArray[np.uint8]


def create_empty_area(width: int, height: int) -> Grid:
    """Return a new empty ``height x width`` area filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


@dataclass(eq=False)
class GameState:
    """Cells permanently occupied by settled pieces, plus session counters."""

    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    area: Grid = field(init=False)
    score: int = 0
    lines: int = 0
    pieces: int = 0

    def __post_init__(self) -> None:
        self.area = create_empty_area(self.width, self.height)

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Cells outside the grid count as occupied so that the walls and the
        floor need no special handling in the collision checks.
        """

        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self.area[y, x] == 0)
        return False

    def fits(self, shape: Shape, position: Tuple[int, int]) -> bool:
        """Return ``True`` if ``shape`` placed at ``position`` overlaps nothing."""

        x, y = position
        return all(self.is_empty(x + dx, y + dy) for dx, dy in shape_cells(shape))

    def _blocked(self, piece: Piece, dx: int, dy: int) -> bool:
        x, y = piece.position
        return not self.fits(piece.shape, (x + dx, y + dy))

    def check_pieces_collision_left(self, piece: Piece) -> bool:
        """Return ``True`` if ``piece`` cannot move one column to the left."""

        return self._blocked(piece, -1, 0)

    def check_pieces_collision_right(self, piece: Piece) -> bool:
        """Return ``True`` if ``piece`` cannot move one column to the right."""

        return self._blocked(piece, 1, 0)

    def check_pieces_collision_bottom(self, piece: Piece) -> bool:
        """Return ``True`` if ``piece`` cannot move one row down."""

        return self._blocked(piece, 0, 1)

    def store_piece_to_game_state(self, piece: Piece) -> None:
        """Copy the piece's filled cells into the area.

        Raises:
            IndexError: If any cell lies outside the grid.  The area is left
                untouched in that case.
        """

        cells = np.asarray(piece.cells(), dtype=np.int32)
        if cells.size == 0:
            return

        xs, ys = cells.T
        if (
            np.any(xs < 0)
            or np.any(xs >= self.width)
            or np.any(ys < 0)
            or np.any(ys >= self.height)
        ):
            raise IndexError("Piece cell out of bounds")

        self.area[ys, xs] = 1
        self.pieces += 1

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed."""

        full_rows = np.all(self.area != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.area[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.area.dtype)
            self.area = np.vstack((new_rows, remaining))
            self.lines += cleared
        return cleared

    def reset(self) -> None:
        """Empty the area and zero the counters."""

        self.area = create_empty_area(self.width, self.height)
        self.score = 0
        self.lines = 0
        self.pieces = 0
