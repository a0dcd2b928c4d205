from __future__ import annotations
import csv, os, time
from typing import Dict, Any, Protocol, Optional, Callable
from core.interfaces import Event, Snapshot, Ate, Collided, BoardFilled, GameStarted
from .metrics import SessionStats

ALL_KEYS = [
    "game",
    "time",
    # result
    "game/score", "game/length", "game/level", "game/steps", "game/reason",
    "game/food_standard", "game/food_bonus", "game/duration_s",
    # session
    "session/best_score", "session/score_ema", "session/score_mean_recent", "session/score_max_recent",
]

class Logger(Protocol):
    def log(self, game: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        scalars = {"game": game, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def make_game_logger(
    *,
    logger: Optional[Logger],
    stats: SessionStats,
    clock: Callable[[], float] = time.monotonic,
    on_summary: Optional[Callable[[Dict[str, Any]], None]] = None,
) -> Callable[[Event, Snapshot], None]:
    """
    Returns a game listener (event, snapshot) -> None that counts food per
    game and, when the game ends, updates the session stats, writes one CSV
    row and hands the row to `on_summary`.

    A game restarted before it ended is not logged.
    """
    counts = {"standard": 0, "bonus": 0}
    started = [clock()]
    game_no = [0]

    def _on_event(event: Event, snap: Snapshot) -> None:
        if isinstance(event, GameStarted):
            counts["standard"] = counts["bonus"] = 0
            started[0] = clock()
            return
        if isinstance(event, Ate):
            counts[event.kind.value] += 1
            return
        if not isinstance(event, (Collided, BoardFilled)):
            return

        game_no[0] += 1
        session = stats.record(snap.score, snap.reason)
        scalars = {
            "time": time.strftime("%Y-%m-%dT%H:%M:%S"),
            "game/score": snap.score,
            "game/length": len(snap.snake),
            "game/level": snap.level,
            "game/steps": snap.step_count,
            "game/reason": snap.reason,
            "game/food_standard": counts["standard"],
            "game/food_bonus": counts["bonus"],
            "game/duration_s": round(clock() - started[0], 3),
            "session/best_score": session["best_score"],
            "session/score_ema": session["score_ema"],
            "session/score_mean_recent": session["score_mean_recent"],
            "session/score_max_recent": session["score_max_recent"],
        }
        if logger is not None:
            logger.log(game_no[0], scalars)
            logger.flush()
        if on_summary is not None:
            on_summary({"game": game_no[0], **scalars})

    return _on_event
