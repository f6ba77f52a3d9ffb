"""Path engine: the occupied cells, head first, and the per-tick advance."""

import enum
from typing import Container, Iterable, Iterator, Tuple

from .direction import Direction
from .grid import Cell, Grid


class Move(enum.Enum):
    MOVED = "moved"
    GREW = "grew"
    COLLIDED = "collided"


class Path:
    """
    Head at index 0, tail at the end.

    `cells` is a tuple that is replaced on every advance, never mutated,
    so a reader always sees either the whole old path or the whole new one.
    """

    def __init__(self, grid: Grid, cells: Iterable[Cell]):
        self.grid = grid
        self.cells: Tuple[Cell, ...] = tuple(grid.check(c) for c in cells)
        if not self.cells:
            raise ValueError("Path needs at least one cell")
        if len(set(self.cells)) != len(self.cells):
            raise ValueError(f"Path has duplicate cells: {self.cells}")

    @classmethod
    def initial(cls, grid: Grid) -> "Path":
        """Three cells in a row, head pointing right."""
        hx, hy = max(grid.width // 3, 2), grid.height // 2
        return cls(grid, [(hx - i, hy) for i in range(3)])

    @property
    def head(self) -> Cell:
        return self.cells[0]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __contains__(self, cell) -> bool:
        return cell in self.cells

    def advance(self, direction: Direction, foods: Container[Cell]) -> Move:
        """
        Move one cell in `direction`.
        - Collision is checked against the pre-tick path, tail included,
          and leaves the path untouched.
        - Landing on food keeps the tail (growth); eating it is up to the caller.
        """
        new_head = self.grid.wrap(self.head, *direction)

        # Self collision
        if new_head in self.cells:
            return Move.COLLIDED

        # Move / grow
        if new_head in foods:
            self.cells = (new_head,) + self.cells
            return Move.GREW
        self.cells = (new_head,) + self.cells[:-1]
        return Move.MOVED

    def __repr__(self):
        return f"<Path len={len(self.cells)} head={self.head}>"
