from __future__ import annotations
from collections import Counter, deque
from typing import Deque, Dict, Optional

class EMA:
    """Exponential moving average of final scores."""
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.value: Optional[float] = None
    def update(self, x: float) -> float:
        self.value = x if self.value is None else (self.alpha * x + (1 - self.alpha) * self.value)
        return self.value

class WindowedStat:
    """Mean/min/max over the last `window` games."""
    def __init__(self, window: int):
        self.buf: Deque[float] = deque(maxlen=window)
    def add(self, x: float) -> None:
        self.buf.append(float(x))
    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0}
        return {"mean": sum(self.buf) / len(self.buf), "min": min(self.buf), "max": max(self.buf)}

class SessionStats:
    """Running totals across the games of one session."""
    def __init__(self, window: int = 20, alpha: float = 0.2):
        self.games = 0
        self.best_score = 0
        self.endings: Counter = Counter()
        self.score_ema = EMA(alpha)
        self.recent = WindowedStat(window)

    def record(self, score: int, reason: Optional[str]) -> Dict[str, float]:
        self.games += 1
        self.best_score = max(self.best_score, score)
        self.endings[reason or "abandoned"] += 1
        ema = self.score_ema.update(float(score))
        self.recent.add(score)
        win = self.recent.summary()
        return {
            "games": self.games,
            "best_score": self.best_score,
            "score_ema": ema,
            "score_mean_recent": win["mean"],
            "score_max_recent": win["max"],
        }
