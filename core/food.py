# core/food.py
from __future__ import annotations
import random
from typing import AbstractSet, Optional, Tuple
from .interfaces import Food, FoodClass, Position, BoardFullError

class FoodSpawner:
    """Places food on a free cell.

    Rejection-samples uniform cells first. When ``max_attempts`` samples all
    land on the body it scans the grid for free cells instead, so a nearly
    full board still terminates; a completely full board raises
    ``BoardFullError``.
    """
    def __init__(self, rng: Optional[random.Random] = None,
                 bonus_probability: float = 0.15, max_attempts: int = 1000):
        self.rng = rng if rng is not None else random.Random()
        self.bonus_probability = bonus_probability
        self.max_attempts = max_attempts

    def spawn(self, occupied: AbstractSet[Position], grid_w: int, grid_h: int) -> Food:
        pos = self._sample(occupied, grid_w, grid_h)
        if pos is None:
            pos = self._scan(occupied, grid_w, grid_h)
        kind = FoodClass.BONUS if self.rng.random() < self.bonus_probability else FoodClass.STANDARD
        return Food(pos, kind)

    def _sample(self, occupied, grid_w, grid_h) -> Optional[Position]:
        for _ in range(self.max_attempts):
            p = (self.rng.randrange(grid_w), self.rng.randrange(grid_h))
            if p not in occupied:
                return p
        return None

    def _scan(self, occupied, grid_w, grid_h) -> Position:
        free = [(x, y) for x in range(grid_w) for y in range(grid_h) if (x, y) not in occupied]
        if not free:
            raise BoardFullError(f"no free cell left on {grid_w}x{grid_h} grid")
        return self.rng.choice(free)


def spawn(occupied: AbstractSet[Position], grid: Tuple[int, int], bonus_probability: float,
          rng: Optional[random.Random] = None) -> Food:
    grid_w, grid_h = grid
    return FoodSpawner(rng, bonus_probability).spawn(occupied, grid_w, grid_h)
