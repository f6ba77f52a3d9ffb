from dataclasses import dataclass
from typing import Tuple

# ----- Window -----
CELL_SIZE = 32
HEADER_H = 32

# ----- Colors -----
BG     = (20, 20, 24)
YELLOWGREEN = (154, 205, 50)
DARKORANGE  = (255, 140, 0)
TEXT   = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    width: int = 25
    height: int = 25
    food_lifetime_ms: int = 10_000
    food_interval_ms: int = 3_000
    refresh_interval_ms: int = 1_000
    tick_interval_ms: int = 500
    seed: int = 0
    max_spawn_attempts: int = 100
    initial_food: Tuple[Tuple[int, int], ...] = ((4, 10),)

    def __post_init__(self):
        # room for the 3-cell starting path
        if self.width < 3 or self.height < 1:
            raise ValueError(f"Grid too small: {self.width}x{self.height}")
        for name in ("food_lifetime_ms", "food_interval_ms",
                     "refresh_interval_ms", "tick_interval_ms",
                     "max_spawn_attempts"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

CFG = Config()
