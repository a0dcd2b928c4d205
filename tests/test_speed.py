# tests/test_speed.py
import pytest

from core.speed import tick_interval_ms, level

@pytest.mark.parametrize("score, interval", [
    (0, 140), (2, 140), (3, 128), (5, 128), (6, 116), (18, 68), (20, 68), (21, 60), (30, 60),
])
def test_interval_steps_down_with_score(cfg, score, interval):
    assert tick_interval_ms(score, cfg) == interval

def test_interval_never_drops_below_floor(cfg):
    prev = tick_interval_ms(0, cfg)
    for score in range(0, 10_000, 7):
        cur = tick_interval_ms(score, cfg)
        assert 60 <= cur <= prev
        prev = cur
    assert tick_interval_ms(10**9, cfg) == 60

@pytest.mark.parametrize("score, lvl", [(0, 1), (2, 1), (3, 2), (8, 3), (30, 11)])
def test_level(cfg, score, lvl):
    assert level(score, cfg) == lvl

def test_custom_curve(cfg):
    fast = cfg.with_(start_interval_ms=100, min_interval_ms=40, speed_up_every=1, interval_step_ms=30)
    assert [tick_interval_ms(s, fast) for s in range(4)] == [100, 70, 40, 40]
