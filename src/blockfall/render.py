"""pygame drawing for the falling-block simulator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import pygame

from .game_state import GameState
from .piece import Piece

LOGGER = logging.getLogger(__name__)

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
BLUE: Color = (0, 0, 255)
SETTLED: Color = (120, 120, 120)
GRID_LINE: Color = (50, 50, 50)


def convert_coords_to_point(coords: Tuple[int, int], box_size: int) -> Tuple[int, int]:
    """Return the pixel position of the top-left corner of grid cell ``coords``."""

    x, y = coords
    return x * box_size, y * box_size


def load_sprite(path: Union[str, Path], box_size: int) -> pygame.Surface:
    """Load an image and scale it to the size of one cell.

    ``pygame.error`` is propagated if the file cannot be read.
    """

    image = pygame.image.load(str(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    sprite = pygame.transform.scale(image, (box_size, box_size))
    LOGGER.info("Loaded sprite %s", path)
    return sprite


class Renderer:
    """Draw the settled area and the active piece onto ``surface``."""

    def __init__(
        self,
        surface: pygame.Surface,
        box_size: int,
        sprite: Optional[pygame.Surface] = None,
    ) -> None:
        self.surface = surface
        self.box_size = box_size
        self.sprite = sprite

    def _cell_rect(self, coords: Tuple[int, int]) -> pygame.Rect:
        x, y = convert_coords_to_point(coords, self.box_size)
        return pygame.Rect(x, y, self.box_size, self.box_size)

    def draw_area(self, state: GameState) -> None:
        """Render the settled cells."""

        for y, x in zip(*state.area.nonzero()):
            rect = self._cell_rect((int(x), int(y)))
            pygame.draw.rect(self.surface, SETTLED, rect)
            pygame.draw.rect(self.surface, GRID_LINE, rect, 1)

    def draw_piece(self, piece: Piece) -> None:
        """Render the falling piece, as sprites when one is loaded."""

        for coords in piece.cells():
            rect = self._cell_rect(coords)
            if self.sprite is not None:
                self.surface.blit(self.sprite, rect)
            else:
                pygame.draw.rect(self.surface, BLUE, rect)

    def render(self, background: Color, piece: Piece, state: GameState) -> None:
        self.surface.fill(background)
        self.draw_area(state)
        self.draw_piece(piece)
