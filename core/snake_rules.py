# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional
from config import AppConfig
from .food import FoodSpawner
from .interfaces import (
    Snapshot, Event, EventSink, Direction, Food, FoodClass, Lifecycle, CollisionKind, BoardFullError,
    Moved, Ate, Collided, TurnAccepted, IntervalChanged, GameStarted, Paused, Resumed, BoardFilled,
    DIRS, opposite, in_bounds,
)
from .speed import tick_interval_ms, level

logger = logging.getLogger(__name__)

Listener = EventSink


class SnakeGame:
    """One game instance: grid, body, direction, food, score and lifecycle.

    ``tick`` is driven by an external scheduler; every mutating call returns
    the events it produced and also pushes them to subscribed listeners.
    """

    def __init__(self, cfg: AppConfig, rng: Optional[random.Random] = None):
        self.cfg = cfg.validate()
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.spawner = FoodSpawner(self.rng, cfg.bonus_probability, cfg.spawn_max_attempts)
        self.points = {FoodClass.STANDARD: cfg.standard_points, FoodClass.BONUS: cfg.bonus_points}
        self._listeners: List[Listener] = []
        self._reset_state()

    # ---- listeners ----
    def subscribe(self, fn: Listener) -> None:
        self._listeners.append(fn)

    def unsubscribe(self, fn: Listener) -> None:
        self._listeners.remove(fn)

    def _emit(self, events: List[Event]) -> List[Event]:
        if events and self._listeners:
            snap = self.snapshot()
            for ev in events:
                for fn in list(self._listeners):
                    fn(ev, snap)
        return events

    # ---- lifecycle ----
    def _reset_state(self):
        self.snake = [self.cfg.start_pos]
        self.dir: Direction = self.cfg.start_dir
        self.dir_locked = False
        self.score = 0
        self.step_count = 0
        self.interval_ms = self.cfg.start_interval_ms
        self.lifecycle = Lifecycle.RUNNING
        self.reason: Optional[str] = None
        self.food: Food = self.spawner.spawn(set(self.snake), self.cfg.grid_w, self.cfg.grid_h)

    def reset(self) -> List[Event]:
        self._reset_state()
        logger.debug("new game: start=%s food=%s", self.cfg.start_pos, self.food)
        return self._emit([GameStarted(self.interval_ms)])

    def toggle_pause(self) -> List[Event]:
        if self.lifecycle is Lifecycle.RUNNING:
            self.lifecycle = Lifecycle.PAUSED
            return self._emit([Paused()])
        if self.lifecycle is Lifecycle.PAUSED:
            self.lifecycle = Lifecycle.RUNNING
            return self._emit([Resumed()])
        return []

    # ---- input ----
    def set_direction(self, new_dir: Direction) -> List[Event]:
        new_dir = tuple(new_dir)
        if new_dir not in DIRS:
            raise ValueError(f"direction must be a unit vector, got {new_dir}")
        if self.lifecycle is not Lifecycle.RUNNING or self.dir_locked:
            return []
        # a reversal would run the head straight into the neck
        if new_dir == opposite(self.dir):
            return []
        self.dir = new_dir
        self.dir_locked = True
        return self._emit([TurnAccepted(new_dir)])

    # ---- simulation ----
    def tick(self) -> List[Event]:
        if self.lifecycle is not Lifecycle.RUNNING:
            return []
        try:
            events = self._advance()
        finally:
            self.dir_locked = False
        return self._emit(events)

    def _advance(self) -> List[Event]:
        hx, hy = self.snake[0]
        dx, dy = self.dir
        new_head = (hx + dx, hy + dy)
        self.step_count += 1

        if not in_bounds(new_head, self.cfg.grid_w, self.cfg.grid_h):
            return self._end(CollisionKind.WALL)
        # checked against the current body, so the tail still blocks this tick
        if new_head in self.snake:
            return self._end(CollisionKind.SELF)

        self.snake.insert(0, new_head)
        if new_head != self.food.pos:
            self.snake.pop()
            return [Moved(new_head)]

        eaten = self.food
        gained = self.points[eaten.kind]
        self.score += gained
        events: List[Event] = [Ate(eaten.kind, gained)]
        new_interval = tick_interval_ms(self.score, self.cfg)
        if new_interval != self.interval_ms:
            self.interval_ms = new_interval
            events.append(IntervalChanged(new_interval))
        try:
            self.food = self.spawner.spawn(set(self.snake), self.cfg.grid_w, self.cfg.grid_h)
        except BoardFullError:
            self.lifecycle, self.reason = Lifecycle.OVER, "board_full"
            logger.info("board filled at step %d with score %d", self.step_count, self.score)
            events.append(BoardFilled(self.score))
        return events

    def _end(self, kind: CollisionKind) -> List[Event]:
        self.lifecycle, self.reason = Lifecycle.OVER, kind.value
        logger.info("game over (%s) at step %d with score %d", kind.value, self.step_count, self.score)
        return [Collided(kind)]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            dir=self.dir,
            score=self.score,
            level=level(self.score, self.cfg),
            interval_ms=self.interval_ms,
            step_count=self.step_count,
            lifecycle=self.lifecycle,
            reason=self.reason,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )
