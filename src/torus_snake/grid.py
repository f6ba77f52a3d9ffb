"""Grid geometry: cell sampling and toroidal wrap-around."""

from dataclasses import dataclass
import random
from typing import Tuple

Cell = Tuple[int, int]


class InvalidCoordinate(ValueError):
    """Raised when a cell lies outside the grid or is not an (x, y) pair."""


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")

    @property
    def size(self) -> int:
        return self.width * self.height

    def random_cell(self, rng: random.Random) -> Cell:
        """Uniform sample over the whole grid; the cell may be occupied."""
        return (rng.randrange(self.width), rng.randrange(self.height))

    def wrap(self, cell: Cell, dx: int, dy: int) -> Cell:
        """Move `cell` by (dx, dy), re-entering from the opposite edge."""
        x, y = cell
        return ((x + dx + self.width) % self.width, (y + dy + self.height) % self.height)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def check(self, cell: Cell) -> Cell:
        try:
            x, y = cell
        except (TypeError, ValueError):
            raise InvalidCoordinate(f"Not a cell: {cell!r}") from None
        if not (isinstance(x, int) and isinstance(y, int)) or not self.in_bounds((x, y)):
            raise InvalidCoordinate(f"Cell {cell!r} outside {self.width}x{self.height} grid")
        return (x, y)
