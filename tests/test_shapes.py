import numpy as np
import pytest

from blockfall.shapes import SHAPE_NAMES, get_shape, rotate, shape_cells


def test_elko_rotates_clockwise_by_transpose_and_reverse():
    elko = get_shape("elko")
    rotated = rotate(elko)
    assert rotated.shape == (3, 2)
    assert rotated.tolist() == [[1, 1], [0, 1], [1, 1]]


def test_counter_clockwise_rotation_undoes_clockwise():
    for name in SHAPE_NAMES:
        shape = get_shape(name)
        assert np.array_equal(rotate(rotate(shape), clockwise=False), shape)


def test_four_rotations_return_to_spawn_orientation():
    shape = get_shape("L")
    rotated = shape
    for _ in range(4):
        rotated = rotate(rotated)
    assert np.array_equal(rotated, shape)


def test_shape_cells_are_column_row_offsets():
    assert shape_cells(get_shape("elko")) == [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)]
    assert shape_cells(get_shape("I")) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_get_shape_returns_independent_copy():
    shape = get_shape("O")
    shape[0, 0] = 0
    assert get_shape("O")[0, 0] == 1


def test_unknown_shape_is_rejected():
    with pytest.raises(ValueError, match="Unknown shape"):
        get_shape("pentomino")
