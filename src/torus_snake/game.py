# game.py
import enum
import logging
import random
from typing import Optional

import numpy as np  # type: ignore

from .config import Config, CFG
from .direction import Direction, DirectionController
from .food import Food, FoodRegistry
from .grid import Cell, Grid
from .path import Move, Path

logger = logging.getLogger(__name__)


class CellType(enum.IntEnum):
    """Codes stored in the snapshot array."""

    EMPTY = 0
    PATH = 1
    FOOD = 2


# ---------- State ----------
class GameSession:
    """
    Owns the path, the food, the heading and the score.

    Every state change goes through one of four methods: advance_tick,
    spawn_food, sweep_food and set_direction. Each runs to completion
    before the next is called (see scheduler.py).
    """

    def __init__(self, config: Config = CFG, now_ms: int = 0,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.grid = Grid(config.width, config.height)
        self.rng = rng or random.Random(config.seed)
        self.foods = FoodRegistry(
            self.grid,
            lifetime_ms=config.food_lifetime_ms,
            max_attempts=config.max_spawn_attempts,
            rng=self.rng,
        )
        self.controller = DirectionController()
        self.path = Path.initial(self.grid)
        self.score = 0
        for cell in config.initial_food:
            if cell in self.path:
                raise ValueError(f"Initial food {cell} overlaps the path")
            self.foods.add(cell, now_ms)

    @property
    def direction(self) -> Direction:
        return self.controller.heading

    # ---------- Transitions ----------
    def advance_tick(self) -> Move:
        """Advance the path one cell; eat or reset as the move dictates."""
        direction = self.controller.commit()
        move = self.path.advance(direction, self.foods)

        if move is Move.COLLIDED:
            logger.info("Self collision at %s, score was %d", self.path.head, self.score)
            self.reset()
        elif move is Move.GREW:
            self.foods.consume(self.path.head)
            self.score += 1
            logger.debug("Ate food at %s, score %d", self.path.head, self.score)
        return move

    def spawn_food(self, now_ms: int) -> Optional[Food]:
        return self.foods.spawn(self.path.cells, now_ms)

    def sweep_food(self, now_ms: int) -> int:
        return self.foods.sweep_expired(now_ms)

    def set_direction(self, direction: Direction) -> bool:
        return self.controller.request(direction)

    def reset(self) -> None:
        """Score, path and heading go back together; food stays where it is."""
        self.score = 0
        self.controller.reset()
        self.path = Path.initial(self.grid)

    # ---------- Queries ----------
    def cell_type(self, cell: Cell) -> CellType:
        cell = self.grid.check(cell)
        if cell in self.foods:
            return CellType.FOOD
        if cell in self.path:
            return CellType.PATH
        return CellType.EMPTY

    def snapshot(self) -> np.ndarray:
        """(height, width) array of CellType codes, indexed [y, x]."""
        grid = np.zeros((self.grid.height, self.grid.width), dtype=np.int8)
        for x, y in self.path:
            grid[y, x] = CellType.PATH
        # food drawn over path, same precedence as cell_type
        for x, y in self.foods.cells():
            grid[y, x] = CellType.FOOD
        return grid

    def __repr__(self):
        return (
            f"<GameSession score={self.score}, path={len(self.path)}, "
            f"foods={len(self.foods)}, direction={self.direction}>"
        )
