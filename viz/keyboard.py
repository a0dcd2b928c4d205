# viz/keyboard.py
from __future__ import annotations
from typing import List, Optional, Tuple, Union
import pygame as pg
from core.interfaces import UP, DOWN, LEFT, RIGHT

Command = Union[Tuple[int, int], str]   # a direction, or "pause" / "reset" / "quit"

KEYMAP = {
    pg.K_UP: UP, pg.K_w: UP,
    pg.K_DOWN: DOWN, pg.K_s: DOWN,
    pg.K_LEFT: LEFT, pg.K_a: LEFT,
    pg.K_RIGHT: RIGHT, pg.K_d: RIGHT,
    pg.K_SPACE: "pause", pg.K_p: "pause",
    pg.K_r: "reset",
    pg.K_ESCAPE: "quit",
}

def command_for(event: pg.event.Event) -> Optional[Command]:
    if event.type == pg.QUIT:
        return "quit"
    if event.type == pg.KEYDOWN:
        return KEYMAP.get(event.key)
    return None

class Keyboard:
    def poll(self) -> List[Command]:
        """All commands since the last poll, in arrival order."""
        cmds = []
        for e in pg.event.get():
            cmd = command_for(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds
