"""Runtime configuration for the blockfall programs.

The defaults reproduce the very first tutorial snapshot: a 20x30 grid of
20 pixel cells redrawn eight times per second, with the piece falling one row
every third frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from .shapes import SHAPE_NAMES

# Grid size in cells (width, height)
CANVAS_SIZE = (20, 30)
# Size of a single grid cell in pixels
BOX_SIZE = 20
# Frames per second the game loop is capped at
FPS = 8
# The step counter starts at 1; the piece falls when it reaches this value
FALL_STEPS = 4
WINDOW_TITLE = "game tutorial"
# Below three cells a wrapping neighbourhood reaches back to the cell itself
MIN_LIFE_SIZE = 3


class InputMode(str, Enum):
    """How keyboard state is turned into a per-frame direction."""

    SINGLE = "single"
    HELD = "held"


@dataclass(frozen=True)
class GameConfig:
    """Settings for the falling-block simulator."""

    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    box_size: int = BOX_SIZE
    fps: int = FPS
    fall_steps: int = FALL_STEPS
    input_mode: InputMode = InputMode.SINGLE
    shapes: Tuple[str, ...] = SHAPE_NAMES
    sprite: Optional[Path] = None
    seed: Optional[int] = None
    profile: bool = False

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError(f"Grid must be at least 4x4 cells, got {self.width}x{self.height}")
        if self.box_size < 1:
            raise ValueError("box_size must be positive")
        if self.fps < 1:
            raise ValueError("fps must be positive")
        if self.fall_steps < 2:
            raise ValueError("fall_steps must be at least 2")
        if not self.shapes:
            raise ValueError("At least one shape is required")
        unknown = [name for name in self.shapes if name not in SHAPE_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown shape(s) {', '.join(unknown)}; choose from {', '.join(SHAPE_NAMES)}"
            )

    @property
    def window_size(self) -> Tuple[int, int]:
        """Window size in pixels."""

        return self.width * self.box_size, self.height * self.box_size


@dataclass(frozen=True)
class LifeConfig:
    """Settings for the text-mode Life demo."""

    width: int = 16
    height: int = 8
    generations: int = 4
    delay: float = 0.0

    def __post_init__(self) -> None:
        if self.width < MIN_LIFE_SIZE or self.height < MIN_LIFE_SIZE:
            raise ValueError(
                f"Universe must be at least {MIN_LIFE_SIZE}x{MIN_LIFE_SIZE} cells, "
                f"got {self.width}x{self.height}"
            )
        if self.generations < 0:
            raise ValueError("generations cannot be negative")
        if self.delay < 0:
            raise ValueError("delay cannot be negative")
