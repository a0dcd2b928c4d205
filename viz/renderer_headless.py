# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from config import AppConfig
from core.interfaces import Snapshot
from core.featurizers import Featurizer, OccupancyFeaturizer

class HeadlessRenderer:
    """Keeps encoded frames instead of drawing; used by tests and replays."""
    def __init__(self, featurizer: Optional[Featurizer] = None, keep: Optional[int] = None):
        self.featurizer = featurizer or OccupancyFeaturizer()
        self.keep = keep
        self.frames: List[np.ndarray] = []
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()

    def draw(self, snap: Snapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.frames.append(self.featurizer.encode(snap))
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[0]

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass

    def stack(self) -> np.ndarray:
        """All kept frames as one (T, H, W, C) array."""
        return np.stack(self.frames) if self.frames else np.empty((0,))
