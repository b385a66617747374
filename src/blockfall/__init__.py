"""Falling-block simulator and Game of Life tutorial programs."""

from .config import GameConfig, InputMode, LifeConfig
from .shapes import SHAPE_NAMES, get_shape, rotate, shape_cells
from .piece import Direction, Piece
from .game_state import GameState
from .engine import Simulation, spawn_piece, try_rotate, update_piece
from .life import Universe
from .timing import FrameTimer, SectionStat

__all__ = [
    "GameConfig",
    "InputMode",
    "LifeConfig",
    "SHAPE_NAMES",
    "get_shape",
    "rotate",
    "shape_cells",
    "Direction",
    "Piece",
    "GameState",
    "Simulation",
    "spawn_piece",
    "try_rotate",
    "update_piece",
    "Universe",
    "FrameTimer",
    "SectionStat",
]
