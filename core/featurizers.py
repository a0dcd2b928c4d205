from __future__ import annotations
from typing import Protocol, Tuple
import numpy as np
from .interfaces import Snapshot, FoodClass

class Featurizer(Protocol):
    """Encodes a Snapshot into an array."""
    def shape(self, grid_h: int, grid_w: int) -> Tuple[int, ...]: ...
    def encode(self, snap: Snapshot) -> np.ndarray: ...

# channel layout of OccupancyFeaturizer
BODY, HEAD, FOOD, BONUS = 0, 1, 2, 3

class OccupancyFeaturizer(Featurizer):
    """(gridH, gridW, 4) float grid: body without head, head, standard food, bonus food."""
    def __init__(self, flat: bool = False):
        self.flat = flat

    def shape(self, grid_h: int, grid_w: int):
        return (grid_h*grid_w*4,) if self.flat else (grid_h, grid_w, 4)

    def encode(self, snap: Snapshot) -> np.ndarray:
        grid = np.zeros((snap.grid_h, snap.grid_w, 4), dtype=np.float32)
        for (x, y) in snap.snake[1:]:
            grid[y, x, BODY] = 1.0
        hx, hy = snap.head
        grid[hy, hx, HEAD] = 1.0
        fx, fy = snap.food.pos
        grid[fy, fx, BONUS if snap.food.kind is FoodClass.BONUS else FOOD] = 1.0
        if self.flat:
            return grid.reshape(-1)
        return grid

def occupied_mask(snap: Snapshot) -> np.ndarray:
    """Boolean (gridH, gridW) mask of cells covered by the snake."""
    mask = np.zeros((snap.grid_h, snap.grid_w), dtype=bool)
    xs, ys = zip(*snap.snake)
    mask[list(ys), list(xs)] = True
    return mask
