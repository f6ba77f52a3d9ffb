from typing import Tuple

from .config import DIRECTIONS, RIGHT

Direction = Tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class DirectionController:
    """
    Current heading plus the turn queued for the next tick.

    Requests are checked against the committed heading, not the pending
    one, so any number of key presses between two ticks can never add up
    to a 180° turn.
    """

    def __init__(self, initial: Direction = RIGHT):
        self.initial = initial
        self.heading = initial
        self.pending = initial

    def request(self, direction: Direction) -> bool:
        """Queue a turn. Returns False when it was ignored as a reversal."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction {direction!r}")
        if is_opposite(direction, self.heading):
            return False
        self.pending = direction
        return True

    def commit(self) -> Direction:
        self.heading = self.pending
        return self.heading

    def reset(self) -> None:
        self.heading = self.initial
        self.pending = self.initial
