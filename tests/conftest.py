# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def game_factory(cfg):
    from core.snake_rules import SnakeGame
    def make(body=None, dir=(1, 0), food=None, **overrides):
        """Game with an optional hand-placed body/food; `food` is a Food or a position."""
        from core.interfaces import Food
        game = SnakeGame(cfg.with_(**overrides), rng=random.Random(7))
        if body is not None:
            game.snake = list(body)
        game.dir = dir
        if food is not None:
            game.food = food if isinstance(food, Food) else Food(food)
        elif body is not None:
            # park the food somewhere off the body so plain moves stay plain
            game.food = Food(next((x, y) for y in range(game.cfg.grid_h)
                                  for x in range(game.cfg.grid_w) if (x, y) not in set(body)
                                  and (x, y) != (body[0][0] + dir[0], body[0][1] + dir[1])))
        return game
    return make

class FakeClock:
    def __init__(self, now: int = 0):
        self.now = now
    def __call__(self) -> int:
        return self.now
    def advance(self, ms: int) -> None:
        self.now += ms

@pytest.fixture
def clock():
    return FakeClock()
