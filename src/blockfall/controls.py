"""Keyboard state to per-frame direction."""

from __future__ import annotations

from typing import List

import pygame

from .config import InputMode
from .piece import Direction

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class Controls:
    """Collect key presses between frames.

    In ``SINGLE`` mode only the last key pressed since the previous frame is
    reported, once.  In ``HELD`` mode a key keeps being reported every frame
    for as long as it is held; when several keys are held the most recently
    pressed one wins.  Rotation (``UP``) is reported once per press in both
    modes.
    """

    def __init__(self, mode: InputMode = InputMode.SINGLE) -> None:
        self.mode = mode
        self._pending = Direction.NONE
        self._held: List[Direction] = []

    @property
    def held(self) -> List[Direction]:
        return list(self._held)

    def press(self, direction: Direction) -> None:
        if direction is Direction.NONE:
            return
        # Remember the press even if the key is released before the next frame
        self._pending = direction
        if self.mode is InputMode.HELD and direction is not Direction.UP:
            if direction in self._held:
                self._held.remove(direction)
            self._held.append(direction)

    def release(self, direction: Direction) -> None:
        if direction in self._held:
            self._held.remove(direction)

    def take(self) -> Direction:
        """Return the direction to apply this frame."""

        if self._pending is not Direction.NONE:
            direction = self._pending
            self._pending = Direction.NONE
            return direction
        if self.mode is InputMode.HELD and self._held:
            return self._held[-1]
        return Direction.NONE

    def clear(self) -> None:
        self._pending = Direction.NONE
        self._held.clear()
