# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 20
    grid_h: int = 20
    start_pos: Tuple[int, int] = (10, 10)
    start_dir: Tuple[int, int] = (1, 0)
    seed: Optional[int] = None

    # speed curve (milliseconds)
    start_interval_ms: int = 140
    min_interval_ms: int = 60
    speed_up_every: int = 3              # points per level
    interval_step_ms: int = 12

    # food
    bonus_probability: float = 0.15
    standard_points: int = 1
    bonus_points: int = 3
    spawn_max_attempts: int = 1000       # rejection samples before scanning free cells

    # render
    render_cell: int = 20
    render_title: str = "Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    fps: int = 60                        # frame rate of the pygame loop, not the tick rate

    # session log
    log_dir: Optional[str] = None
    stats_window: int = 20
    stats_ema_alpha: float = 0.2

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.grid_w < 2 or self.grid_h < 2:
            raise ValueError(f"grid must be at least 2x2, got {self.grid_w}x{self.grid_h}")
        sx, sy = self.start_pos
        if not (0 <= sx < self.grid_w and 0 <= sy < self.grid_h):
            raise ValueError(f"start_pos {self.start_pos} outside {self.grid_w}x{self.grid_h} grid")
        if self.start_dir not in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            raise ValueError(f"start_dir must be a unit vector, got {self.start_dir}")
        if not 0.0 <= self.bonus_probability <= 1.0:
            raise ValueError(f"bonus_probability must be in [0, 1], got {self.bonus_probability}")
        if self.min_interval_ms <= 0 or self.start_interval_ms < self.min_interval_ms:
            raise ValueError("need 0 < min_interval_ms <= start_interval_ms")
        if self.speed_up_every <= 0 or self.interval_step_ms < 0:
            raise ValueError("speed_up_every must be positive and interval_step_ms non-negative")
        if self.spawn_max_attempts <= 0:
            raise ValueError("spawn_max_attempts must be positive")
        return self
