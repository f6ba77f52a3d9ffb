"""Snake on a wrap-around grid with expiring food."""

from .config import Config, CFG, UP, DOWN, LEFT, RIGHT
from .game import CellType, GameSession
from .grid import Grid, InvalidCoordinate
from .path import Move

__all__ = [
    "Config", "CFG", "UP", "DOWN", "LEFT", "RIGHT",
    "CellType", "GameSession", "Grid", "InvalidCoordinate", "Move",
]
