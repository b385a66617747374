"""The falling piece."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .shapes import Shape, rotate, shape_cells


class Direction(Enum):
    """Movement requested for the piece during one frame."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


# Grid offsets for the directions that translate the piece.  ``UP`` rotates
# instead and therefore has no entry.
DIRECTION_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


@dataclass(eq=False)
class Piece:
    """Active falling piece.

    ``position`` is the ``(x, y)`` cell of the shape's top-left corner, with
    ``x`` counting columns and ``y`` counting rows.  ``steps`` is the frame
    counter used to slow down the automatic fall.
    """

    position: Tuple[int, int]
    shape: Shape
    direction: Direction = Direction.NONE
    steps: int = 1
    name: str = ""

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by ``dx`` columns and ``dy`` rows."""

        x, y = self.position
        self.position = (x + dx, y + dy)

    def rotated(self, clockwise: bool = True) -> Shape:
        """Return the rotated shape without changing the piece."""

        return rotate(self.shape, clockwise)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the grid coordinates covered by the piece."""

        x, y = self.position
        return [(x + dx, y + dy) for dx, dy in shape_cells(self.shape)]
