# tests/test_scheduler.py
import pytest

from core.interfaces import (
    Food, FoodClass, CollisionKind, GameStarted, IntervalChanged, Paused, Resumed, Collided, BoardFilled,
)
from runners.scheduler import TickScheduler

def test_inactive_until_armed(clock):
    s = TickScheduler(clock)
    clock.advance(10_000)
    assert not s.active
    assert not s.due()

def test_fires_once_per_interval(clock):
    s = TickScheduler(clock)
    s.arm(140)
    clock.advance(139)
    assert not s.due()
    clock.advance(1)
    assert s.due()
    assert not s.due()
    clock.advance(140)
    assert s.due()

def test_long_frame_does_not_double_fire(clock):
    s = TickScheduler(clock)
    s.arm(100)
    clock.advance(450)
    assert s.due()
    assert not s.due()
    clock.advance(99)
    assert not s.due()
    clock.advance(1)
    assert s.due()

def test_rearm_replaces_pending_timer(clock):
    s = TickScheduler(clock)
    s.arm(140)
    clock.advance(130)
    s.arm(128)
    clock.advance(20)
    assert not s.due()
    clock.advance(108)
    assert s.due()
    assert s.interval_ms == 128

def test_rejects_non_positive_interval(clock):
    with pytest.raises(ValueError):
        TickScheduler(clock).arm(0)

def test_follows_game_events(clock, game_factory):
    g = game_factory(body=[(5, 5)], food=Food((6, 5), FoodClass.BONUS))
    s = TickScheduler(clock)
    g.subscribe(s.on_event)

    g.reset()
    assert s.active and s.interval_ms == 140

    g.snake, g.food = [(5, 5)], Food((6, 5), FoodClass.BONUS)
    g.tick()
    assert s.interval_ms == 128

    g.toggle_pause()
    assert not s.active
    g.toggle_pause()
    assert s.active and s.interval_ms == 128

    g.snake, g.dir = [(19, 5)], (1, 0)
    g.tick()
    assert not s.active

@pytest.mark.parametrize("event", [Paused(), Collided(CollisionKind.SELF), BoardFilled(40)])
def test_stops_on_pause_and_game_end(clock, cfg, event):
    from core.snake_rules import SnakeGame
    snap = SnakeGame(cfg).snapshot()
    s = TickScheduler(clock)
    s.on_event(GameStarted(140), snap)
    s.on_event(event, snap)
    assert not s.active

def test_resume_uses_snapshot_interval(clock, cfg):
    from core.snake_rules import SnakeGame
    snap = SnakeGame(cfg).snapshot()
    s = TickScheduler(clock)
    s.on_event(IntervalChanged(92), snap)
    s.on_event(Paused(), snap)
    s.on_event(Resumed(), snap)
    assert s.interval_ms == snap.interval_ms == 140
