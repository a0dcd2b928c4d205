# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.interfaces import Snapshot, Lifecycle
import viz.renderer_colors as theme

def body_color(i: int, n: int):
    """Head colour, then a green gradient that darkens toward the tail."""
    if i == 0:
        return theme.HEAD
    t = i / max(1, n - 1)
    return tuple(int(a + (b - a) * t) for a, b in zip(theme.BODY, theme.BODY_TAIL))

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None
        self._big_font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        """Draw into an existing surface (embedding, tests); no window, no flip."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            self._draw_grid(s)

        fx, fy = s.food.pos
        pg.draw.rect(surf, theme.FOOD_COLORS[s.food.kind.value], pg.Rect(fx * c, fy * c, c, c),
                     border_radius=c // 2)

        n = len(s.snake)
        # tail first so the head is painted on top
        for i in range(n - 1, -1, -1):
            x, y = s.snake[i]
            pg.draw.rect(surf, body_color(i, n), pg.Rect(x * c + 1, y * c + 1, c - 2, c - 2),
                         border_radius=c // 4)

        if self.cfg.render_show_hud:
            self._draw_hud(s)

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _draw_grid(self, s: Snapshot) -> None:
        c = self.cell
        w, h = s.grid_w * c, s.grid_h * c
        for x in range(0, w + 1, c):
            pg.draw.line(self.surf, theme.GRID, (x, 0), (x, h))
        for y in range(0, h + 1, c):
            pg.draw.line(self.surf, theme.GRID, (0, y), (w, y))

    def _fonts(self):
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
            self._big_font = pg.font.SysFont(None, 36)
        return self._font, self._big_font

    def _draw_hud(self, s: Snapshot) -> None:
        font, big = self._fonts()
        self.surf.blit(font.render(f"Score: {s.score}", True, theme.TEXT), (8, 6))
        self.surf.blit(font.render(f"Level: {s.level}", True, theme.TEXT), (8, 26))

        if s.lifecycle is Lifecycle.PAUSED:
            self._banner(big, font, "PAUSED", "Press Space to resume")
        elif s.lifecycle is Lifecycle.OVER:
            title = "BOARD CLEARED" if s.reason == "board_full" else "GAME OVER"
            self._banner(big, font, title, "Press R to restart")

    def _banner(self, big, font, title: str, hint: str) -> None:
        w, h = self.surf.get_size()
        shade = pg.Surface((w, h), pg.SRCALPHA)
        shade.fill(theme.DIM)
        self.surf.blit(shade, (0, 0))
        t = big.render(title, True, theme.TEXT)
        self.surf.blit(t, t.get_rect(center=(w // 2, h // 2 - 14)))
        sub = font.render(hint, True, theme.TEXT)
        self.surf.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 16)))
