"""Shape grids for the falling pieces.

A shape is a small ``uint8`` grid where ``1`` marks a filled cell.  Shapes of
any size are supported; the grid is what gets rotated and collision checked,
so there is no need for precomputed rotation tables.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.uint8]


def _grid(rows: List[List[int]]) -> Shape:
    return np.array(rows, dtype=np.uint8)


# Spawn orientation of every known shape.  ``elko`` is the arch-shaped piece
# the simulator started out with; the rest are the standard tetrominoes.
_BASE_SHAPES: Dict[str, Shape] = {
    "elko": _grid([[1, 1, 1], [1, 0, 1]]),
    "I": _grid([[1, 1, 1, 1]]),
    "O": _grid([[1, 1], [1, 1]]),
    "T": _grid([[1, 1, 1], [0, 1, 0]]),
    "S": _grid([[0, 1, 1], [1, 1, 0]]),
    "Z": _grid([[1, 1, 0], [0, 1, 1]]),
    "J": _grid([[1, 0, 0], [1, 1, 1]]),
    "L": _grid([[0, 0, 1], [1, 1, 1]]),
}

SHAPE_NAMES: Tuple[str, ...] = tuple(_BASE_SHAPES)


def get_shape(name: str) -> Shape:
    """Return a fresh copy of the shape called ``name``.

    Raises:
        ValueError: If ``name`` is not a known shape.
    """

    try:
        return _BASE_SHAPES[name].copy()
    except KeyError:
        raise ValueError(
            f"Unknown shape {name!r}; choose from {', '.join(SHAPE_NAMES)}"
        ) from None


def rotate(shape: Shape, clockwise: bool = True) -> Shape:
    """Return ``shape`` rotated by 90 degrees.

    The rotation transposes the grid and then reverses it: each row for a
    clockwise turn, the row order for a counter-clockwise one.  A ``2x3``
    shape becomes ``3x2``.
    """

    transposed = shape.T
    if clockwise:
        return np.ascontiguousarray(transposed[:, ::-1])
    return np.ascontiguousarray(transposed[::-1, :])


def shape_cells(shape: Shape) -> List[Tuple[int, int]]:
    """Return the ``(dx, dy)`` offsets of the filled cells in ``shape``."""

    rows, cols = np.nonzero(shape)
    return [(int(c), int(r)) for r, c in zip(rows, cols)]
