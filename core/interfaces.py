# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Protocol, Union

Position = Tuple[int, int]
Direction = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRS = (RIGHT, DOWN, LEFT, UP)


class BoardFullError(RuntimeError):
    """Raised by the food spawner when every cell of the grid is occupied."""


class FoodClass(Enum):
    STANDARD = "standard"
    BONUS = "bonus"


class Lifecycle(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class CollisionKind(Enum):
    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class Food:
    pos: Position
    kind: FoodClass = FoodClass.STANDARD


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Position, ...]   # head first
    food: Food
    dir: Direction
    score: int
    level: int
    interval_ms: int
    step_count: int
    lifecycle: Lifecycle
    reason: str | None
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Position:
        return self.snake[0]


# ---- events ----
@dataclass(frozen=True)
class Moved:
    head: Position

@dataclass(frozen=True)
class Ate:
    kind: FoodClass
    points: int

@dataclass(frozen=True)
class Collided:
    kind: CollisionKind

@dataclass(frozen=True)
class TurnAccepted:
    dir: Direction

@dataclass(frozen=True)
class IntervalChanged:
    interval_ms: int

@dataclass(frozen=True)
class GameStarted:
    interval_ms: int

@dataclass(frozen=True)
class Paused:
    pass

@dataclass(frozen=True)
class Resumed:
    pass

@dataclass(frozen=True)
class BoardFilled:
    score: int

Event = Union[Moved, Ate, Collided, TurnAccepted, IntervalChanged,
              GameStarted, Paused, Resumed, BoardFilled]


class EventSink(Protocol):
    def __call__(self, event: Event, snap: Snapshot) -> None: ...


def is_terminal(event: Event) -> bool:
    return isinstance(event, (Collided, BoardFilled))


def opposite(d: Direction) -> Direction:
    return (-d[0], -d[1])


def in_bounds(p: Position, grid_w: int, grid_h: int) -> bool:
    return 0 <= p[0] < grid_w and 0 <= p[1] < grid_h
