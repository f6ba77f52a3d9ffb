"""Tests for the timer/input scheduler. No display is opened."""

import pygame
import pytest

from torus_snake.config import Config, UP, DOWN, RIGHT
from torus_snake.game import GameSession
from torus_snake.scheduler import (
    KEY_DIRECTIONS,
    SPAWN_EVENT,
    SWEEP_EVENT,
    TICK_EVENT,
    TIMER_EVENTS,
    Scheduler,
)


@pytest.fixture
def timers(monkeypatch):
    """Record set_timer calls instead of talking to SDL."""
    calls = []
    cleared = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda ev, ms: calls.append((ev, ms)))
    monkeypatch.setattr(pygame.event, "clear", lambda types=None: cleared.append(types))
    return calls, cleared


@pytest.fixture
def scheduler(timers):
    session = GameSession(Config(initial_food=()), now_ms=0)
    now = {"ms": 0}
    sched = Scheduler(session, clock=lambda: now["ms"])
    sched.now = now
    sched.start()
    return sched


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestLifecycle:
    """Tests for start/stop and the context manager."""

    def test_start_arms_three_timers(self, timers):
        calls, _ = timers
        cfg = Config()
        Scheduler(GameSession(cfg)).start()
        assert calls == [
            (TICK_EVENT, cfg.tick_interval_ms),
            (SPAWN_EVENT, cfg.food_interval_ms),
            (SWEEP_EVENT, cfg.refresh_interval_ms),
        ]

    def test_stop_disarms_and_clears_queue(self, timers):
        calls, cleared = timers
        sched = Scheduler(GameSession())
        sched.start()
        calls.clear()
        sched.stop()
        assert calls == [(ev, 0) for ev in TIMER_EVENTS]
        assert cleared == [TIMER_EVENTS]
        assert sched.running is False

    def test_context_manager_stops_on_error(self, timers):
        calls, _ = timers
        with pytest.raises(RuntimeError):
            with Scheduler(GameSession()) as sched:
                assert sched.running
                raise RuntimeError("boom")
        assert calls[-3:] == [(ev, 0) for ev in TIMER_EVENTS]
        assert sched.running is False

    def test_events_after_stop_are_ignored(self, scheduler):
        scheduler.stop()
        head = scheduler.session.path.head
        assert scheduler.dispatch(pygame.event.Event(TICK_EVENT)) is True
        scheduler.dispatch(key(pygame.K_UP))
        assert scheduler.session.path.head == head
        assert scheduler.session.controller.pending == RIGHT


class TestDispatch:
    """Tests for Scheduler.dispatch routing."""

    def test_tick_event_advances(self, scheduler):
        scheduler.dispatch(pygame.event.Event(TICK_EVENT))
        assert scheduler.session.path.head == (9, 12)

    def test_spawn_event_uses_clock(self, scheduler):
        scheduler.now["ms"] = 3000
        scheduler.dispatch(pygame.event.Event(SPAWN_EVENT))
        foods = list(scheduler.session.foods)
        assert len(foods) == 1
        assert foods[0].arrival_ms == 3000

    def test_sweep_event_uses_clock(self, scheduler):
        scheduler.session.foods.add((0, 0), 0)
        scheduler.now["ms"] = 9_999
        scheduler.dispatch(pygame.event.Event(SWEEP_EVENT))
        assert len(scheduler.session.foods) == 1
        scheduler.now["ms"] = 10_000
        scheduler.dispatch(pygame.event.Event(SWEEP_EVENT))
        assert len(scheduler.session.foods) == 0

    def test_arrow_key_sets_pending_heading(self, scheduler):
        scheduler.dispatch(key(pygame.K_DOWN))
        assert scheduler.session.controller.pending == DOWN
        assert scheduler.session.direction == RIGHT

    def test_keys_then_tick(self, scheduler):
        """Only the next tick picks up the heading set by key presses."""
        for k in (pygame.K_UP, pygame.K_LEFT):
            scheduler.dispatch(key(k))
        scheduler.dispatch(pygame.event.Event(TICK_EVENT))
        assert scheduler.session.direction == UP
        assert scheduler.session.path.head == (8, 11)

    def test_unmapped_key_ignored(self, scheduler):
        assert scheduler.dispatch(key(pygame.K_SPACE)) is True
        assert scheduler.session.controller.pending == RIGHT

    def test_quit_and_escape_stop_loop(self, scheduler):
        assert scheduler.dispatch(pygame.event.Event(pygame.QUIT)) is False
        assert scheduler.dispatch(key(pygame.K_ESCAPE)) is False

    def test_wasd_mapped(self):
        assert KEY_DIRECTIONS[pygame.K_w] == UP
        assert KEY_DIRECTIONS[pygame.K_s] == DOWN
