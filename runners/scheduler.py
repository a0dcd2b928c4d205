# runners/scheduler.py
from __future__ import annotations
import logging
from typing import Callable, Optional
import pygame as pg
from core.interfaces import (
    Event, Snapshot, GameStarted, IntervalChanged, Paused, Resumed, is_terminal,
)

logger = logging.getLogger(__name__)

class TickScheduler:
    """Cancellable repeating timer that drives SnakeGame.tick from a frame loop.

    The loop calls ``due()`` once per frame; at most one tick is reported per
    call, and ticks missed during a long frame are dropped rather than replayed.
    Subscribe ``on_event`` to the game so interval changes cancel and re-arm
    the timer.
    """
    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or pg.time.get_ticks
        self.interval_ms: Optional[int] = None
        self._next_due: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._next_due is not None

    def arm(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self.cancel()
        self.interval_ms = interval_ms
        self._next_due = self.clock() + interval_ms

    def cancel(self) -> None:
        self._next_due = None

    def due(self) -> bool:
        if self._next_due is None:
            return False
        now = self.clock()
        if now < self._next_due:
            return False
        self._next_due += self.interval_ms
        if self._next_due <= now:
            self._next_due = now + self.interval_ms
        return True

    def on_event(self, event: Event, snap: Snapshot) -> None:
        if isinstance(event, (GameStarted, IntervalChanged)):
            logger.debug("re-arming tick timer at %d ms", event.interval_ms)
            self.arm(event.interval_ms)
        elif isinstance(event, Resumed):
            self.arm(snap.interval_ms)
        elif isinstance(event, Paused) or is_terminal(event):
            self.cancel()
