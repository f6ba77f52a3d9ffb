"""
food.py
Spawning, expiry and consumption of the food items on the grid.
"""
from dataclasses import dataclass
import logging
import random
from typing import Dict, Iterable, Iterator, List, Optional

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    cell: Cell
    arrival_ms: int

    def age(self, now_ms: int) -> int:
        return now_ms - self.arrival_ms


class FoodRegistry:
    """
    Active food items, in arrival order.

    Items are keyed by cell so no two share a coordinate; dict insertion
    order doubles as arrival order because spawns are stamped with a
    monotonic clock.
    """

    def __init__(self, grid: Grid, lifetime_ms: int, max_attempts: int = 100,
                 rng: Optional[random.Random] = None):
        self.grid = grid
        self.lifetime_ms = lifetime_ms
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()
        self._items: Dict[Cell, Food] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Food]:
        return iter(list(self._items.values()))

    def __contains__(self, cell) -> bool:
        return self.contains(cell)

    def cells(self) -> List[Cell]:
        return list(self._items)

    def contains(self, cell: Cell) -> bool:
        return self.grid.check(cell) in self._items

    def clear(self) -> None:
        self._items.clear()

    def add(self, cell: Cell, now_ms: int) -> Food:
        """Place a food item at a known cell."""
        cell = self.grid.check(cell)
        if cell in self._items:
            raise ValueError(f"Food already at {cell}")
        food = Food(cell, now_ms)
        self._items[cell] = food
        return food

    def spawn(self, occupied: Iterable[Cell], now_ms: int) -> Optional[Food]:
        """
        Put one food item on a random free cell.
        - occupied: cells held by the path; existing food is excluded too
        Gives up after max_attempts misses and returns None; the next
        spawn interval simply tries again.
        """
        taken = set(occupied) | set(self._items)
        if len(taken) >= self.grid.size:
            logger.debug("No free cell for food (%d/%d taken)", len(taken), self.grid.size)
            return None

        for _ in range(self.max_attempts):
            cell = self.grid.random_cell(self.rng)
            if cell not in taken:
                return self.add(cell, now_ms)

        logger.debug("Food spawn gave up after %d attempts", self.max_attempts)
        return None

    def sweep_expired(self, now_ms: int) -> int:
        """Drop every item whose age reached the lifetime. Returns how many went."""
        fresh = {cell: food for cell, food in self._items.items()
                 if food.age(now_ms) < self.lifetime_ms}
        removed = len(self._items) - len(fresh)
        self._items = fresh
        if removed:
            logger.debug("Expired %d food item(s)", removed)
        return removed

    def consume(self, cell: Cell) -> Optional[Food]:
        """Remove the item at `cell`; no-op when there is none."""
        return self._items.pop(self.grid.check(cell), None)
