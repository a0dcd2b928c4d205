# runners/run_snake.py
from __future__ import annotations
import logging
import os
from typing import Any, Callable, Dict, Optional
from config import AppConfig
from core.snake_rules import SnakeGame
from runners.scheduler import TickScheduler
from stats.logging import ALL_KEYS, CSVLogger, make_game_logger
from stats.metrics import SessionStats
from viz.keyboard import Keyboard
from viz.render_iface import Renderer

logger = logging.getLogger(__name__)

def print_summary(row: Dict[str, Any]) -> None:
    print(f"[game {row['game']}] score={row['game/score']} level={row['game/level']} "
          f"length={row['game/length']} reason={row['game/reason']} "
          f"best={row['session/best_score']}")

def main(
    cfg: AppConfig,
    renderer: Optional[Renderer] = None,
    keyboard: Optional[Keyboard] = None,
    clock: Optional[Callable[[], int]] = None,
    max_frames: Optional[int] = None,
) -> SessionStats:
    """Play until the window closes (or `max_frames` frames have been drawn)."""
    if renderer is None:
        from viz.renderer_pygame import PygameRenderer
        renderer = PygameRenderer()
    kbd = keyboard or Keyboard()

    game = SnakeGame(cfg)
    sched = TickScheduler(clock)
    game.subscribe(sched.on_event)

    stats = SessionStats(window=cfg.stats_window, alpha=cfg.stats_ema_alpha)
    csv_log = None
    if cfg.log_dir:
        csv_log = CSVLogger(os.path.join(cfg.log_dir, "games.csv"), fieldnames=ALL_KEYS)
        logger.info("logging finished games to %s", csv_log.path)
    game.subscribe(make_game_logger(logger=csv_log, stats=stats, on_summary=print_summary))

    renderer.open(cfg)
    game.reset()
    frames = 0
    try:
        running = True
        while running:
            for cmd in kbd.poll():
                if cmd == "quit":
                    running = False
                    break
                if cmd == "pause":
                    game.toggle_pause()
                elif cmd == "reset":
                    game.reset()
                else:
                    game.set_direction(cmd)
            if not running:
                break

            if sched.due():
                game.tick()

            renderer.draw(game.snapshot())
            renderer.tick(cfg.fps)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
    finally:
        renderer.close()
        if csv_log is not None:
            csv_log.close()

    logger.info("session over after %d games, best score %d", stats.games, stats.best_score)
    return stats
