"""
Timers and keyboard input, funnelled into one event loop.

The tick, food-spawn and food-sweep timers are pygame timer events, so
they queue up next to key presses and are handled one at a time by
`Scheduler.dispatch`. No two transitions ever run at once.
"""
import logging
from typing import Callable

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameSession

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
SPAWN_EVENT = pygame.USEREVENT + 2
SWEEP_EVENT = pygame.USEREVENT + 3
TIMER_EVENTS = (TICK_EVENT, SPAWN_EVENT, SWEEP_EVENT)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}


class Scheduler:
    def __init__(self, session: GameSession,
                 clock: Callable[[], int] = pygame.time.get_ticks):
        self.session = session
        self.clock = clock
        self.running = False

    def start(self) -> None:
        cfg = self.session.config
        pygame.time.set_timer(TICK_EVENT, cfg.tick_interval_ms)
        pygame.time.set_timer(SPAWN_EVENT, cfg.food_interval_ms)
        pygame.time.set_timer(SWEEP_EVENT, cfg.refresh_interval_ms)
        self.running = True
        logger.debug("Timers armed: tick=%dms spawn=%dms sweep=%dms",
                     cfg.tick_interval_ms, cfg.food_interval_ms, cfg.refresh_interval_ms)

    def stop(self) -> None:
        """Disarm every timer and drop timer events already in the queue."""
        self.running = False
        for event_type in TIMER_EVENTS:
            pygame.time.set_timer(event_type, 0)
        pygame.event.clear(TIMER_EVENTS)
        logger.debug("Timers stopped")

    def __enter__(self) -> "Scheduler":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Apply one event to the session. Return False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if not self.running:
            return True

        if event.type == TICK_EVENT:
            self.session.advance_tick()
        elif event.type == SPAWN_EVENT:
            self.session.spawn_food(self.clock())
        elif event.type == SWEEP_EVENT:
            self.session.sweep_food(self.clock())
        elif event.type == pygame.KEYDOWN:
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                self.session.set_direction(direction)
        return True
