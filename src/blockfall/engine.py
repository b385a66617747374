"""Falling-piece update logic.

One call to :func:`update_piece` corresponds to one frame of the game loop:
the requested direction is applied, then the step counter decides whether the
piece also falls by a row.  :class:`Simulation` strings frames together by
settling pieces, clearing rows and spawning the next shape.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .config import FALL_STEPS, GameConfig
from .game_state import GameState
from .piece import Direction, Piece
from .shapes import Shape, get_shape

LOGGER = logging.getLogger(__name__)

# Points per cleared row, multiplied by the number of rows cleared at once
LINE_SCORE = 100


def spawn_piece(state: GameState, shape: Shape, name: str = "") -> Piece:
    """Return a new piece at the top centre of ``state``'s grid."""

    x = state.width // 2 - 2
    x = max(0, min(x, state.width - shape.shape[1]))
    return Piece(position=(x, 0), shape=shape, name=name)


def try_rotate(piece: Piece, state: GameState) -> bool:
    """Rotate ``piece`` clockwise if the rotated shape fits where it is."""

    rotated = piece.rotated()
    if not state.fits(rotated, piece.position):
        return False
    piece.shape = rotated
    return True


def _apply_direction(piece: Piece, state: GameState) -> None:
    direction = piece.direction
    if direction is Direction.LEFT:
        if not state.check_pieces_collision_left(piece):
            piece.move(-1, 0)
    elif direction is Direction.RIGHT:
        if not state.check_pieces_collision_right(piece):
            piece.move(1, 0)
    elif direction is Direction.DOWN:
        if not state.check_pieces_collision_bottom(piece):
            piece.move(0, 1)
    elif direction is Direction.UP:
        try_rotate(piece, state)


def update_piece(piece: Piece, state: GameState, fall_steps: int = FALL_STEPS) -> bool:
    """Advance ``piece`` by one frame.

    Returns ``True`` when the piece could not fall any further and has been
    stored into ``state``.  The caller is expected to spawn a new piece in
    that case.
    """

    _apply_direction(piece, state)
    piece.direction = Direction.NONE

    # Only once every ``fall_steps - 1`` frames the piece falls by one row
    piece.steps += 1
    if piece.steps < fall_steps:
        return False
    piece.steps = 1

    if state.check_pieces_collision_bottom(piece):
        state.store_piece_to_game_state(piece)
        return True
    piece.move(0, 1)
    return False


class Simulation:
    """A running game: the settled grid plus the piece currently falling."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = GameState(self.config.width, self.config.height)
        self.games = 1
        self.piece = self._spawn()

    def _spawn(self) -> Piece:
        name = self.rng.choice(self.config.shapes)
        return spawn_piece(self.state, get_shape(name), name)

    def _settle(self) -> None:
        cleared = self.state.clear_full_rows()
        if cleared:
            self.state.score += LINE_SCORE * cleared * cleared
            LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.state.score)

        self.piece = self._spawn()
        if not self.state.fits(self.piece.shape, self.piece.position):
            self.game_over()

    def game_over(self) -> None:
        """Log the end of the game and start a fresh one."""

        LOGGER.info(
            "Game over after %d piece(s), score %d. Resetting.",
            self.state.pieces,
            self.state.score,
        )
        self.state.reset()
        self.games += 1
        self.piece = self._spawn()

    def step(self, direction: Direction = Direction.NONE) -> bool:
        """Run one frame with ``direction`` and return whether a piece settled."""

        self.piece.direction = direction
        settled = update_piece(self.piece, self.state, self.config.fall_steps)
        if settled:
            LOGGER.debug("Piece %s settled at %s", self.piece.name, self.piece.position)
            self._settle()
        return settled
