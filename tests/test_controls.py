from blockfall.config import InputMode
from blockfall.controls import Controls
from blockfall.piece import Direction


def test_single_mode_reports_last_press_once():
    controls = Controls(InputMode.SINGLE)
    controls.press(Direction.LEFT)
    controls.press(Direction.RIGHT)
    assert controls.take() is Direction.RIGHT
    assert controls.take() is Direction.NONE
    assert controls.held == []


def test_held_mode_repeats_most_recent_held_key():
    controls = Controls(InputMode.HELD)
    controls.press(Direction.LEFT)
    assert controls.take() is Direction.LEFT
    assert controls.take() is Direction.LEFT
    controls.press(Direction.RIGHT)
    assert controls.take() is Direction.RIGHT
    assert controls.take() is Direction.RIGHT
    controls.release(Direction.RIGHT)
    assert controls.take() is Direction.LEFT
    controls.release(Direction.LEFT)
    assert controls.take() is Direction.NONE


def test_held_mode_keeps_quick_taps():
    controls = Controls(InputMode.HELD)
    controls.press(Direction.DOWN)
    controls.release(Direction.DOWN)
    assert controls.take() is Direction.DOWN
    assert controls.take() is Direction.NONE


def test_rotation_is_never_repeated():
    controls = Controls(InputMode.HELD)
    controls.press(Direction.UP)
    assert controls.take() is Direction.UP
    assert controls.take() is Direction.NONE


def test_clear_forgets_everything():
    controls = Controls(InputMode.HELD)
    controls.press(Direction.LEFT)
    controls.clear()
    assert controls.take() is Direction.NONE
