# core/speed.py
from __future__ import annotations
from config import AppConfig

def tick_interval_ms(score: int, cfg: AppConfig) -> int:
    """Step function of score: drops interval_step_ms every speed_up_every points, floored at min."""
    steps = score // cfg.speed_up_every
    return max(cfg.min_interval_ms, cfg.start_interval_ms - steps * cfg.interval_step_ms)

def level(score: int, cfg: AppConfig) -> int:
    return score // cfg.speed_up_every + 1
