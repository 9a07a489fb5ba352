# rocket_run/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from rocket_run.game.config import WIDTH, HEIGHT, FLOOR_Y, COLLECT_RADIUS, START_LIVES
from rocket_run.game.level import WorldLayout, level_extent
from rocket_run.game.state import SessionState

# Probe positions ahead of the character (world space)
PROBE_OFFSETS: Tuple[int, int, int] = (60, 120, 240)
OBS_SIZE = 8 + 3 * len(PROBE_OFFSETS)


def _clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _probe(layout: WorldLayout, x: float) -> Tuple[float, float, float]:
    """(chasm flag, platform height norm, collectable flag) at world x."""
    chasm = 1.0 if layout.chasm_at(x) is not None else 0.0

    plat = layout.platform_at(x)
    if plat is None:
        height = 0.0    # "no platform" sentinel
    else:
        height = _clamp((FLOOR_Y - plat.y) / float(FLOOR_Y))

    item = 0.0
    for c in layout.collectables:
        if not c.found and abs(c.x - x) < COLLECT_RADIUS:
            item = 1.0
            break
    return chasm, height, item


def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.zeros(OBS_SIZE, dtype=np.float32)
    high = np.ones(OBS_SIZE, dtype=np.float32)
    low[7] = -1.0   # signed distance to goal
    return low, high


def build_observation(state: SessionState, start_lives: int = START_LIVES) -> np.ndarray:
    """
    Returns a fixed (17,) float32 vector:
      [ x_norm, y_norm, progress, falling, plummeting, lives_frac, collected_frac, goal_dx,
        chasm@60,  plat_h@60,  item@60,
        chasm@120, plat_h@120, item@120,
        chasm@240, plat_h@240, item@240 ]
    - x_norm/y_norm: screen position over WIDTH/HEIGHT, clamped to [0,1]
    - progress: world_x over the level extent, [0,1]
    - goal_dx: (goal_x - world_x) / WIDTH clipped to [-1,1]
    - plat_h: height of the highest platform covering the probe above the floor, 0 if none
    """
    ch = state.character
    lay = state.layout
    lo, hi = level_extent(lay)

    n_items = len(lay.collectables)
    feats: List[float] = [
        _clamp(ch.x / float(WIDTH)),
        _clamp(ch.y / float(HEIGHT)),
        _clamp((ch.world_x - lo) / float(max(1, hi - lo))),
        1.0 if ch.falling else 0.0,
        1.0 if ch.plummeting else 0.0,
        _clamp(state.lives / float(max(1, start_lives))),
        _clamp(state.score / float(n_items)) if n_items else 0.0,
        _clamp((lay.goal.x - ch.world_x) / float(WIDTH), -1.0, 1.0),
    ]
    for dx in PROBE_OFFSETS:
        feats.extend(_probe(lay, ch.world_x + dx))

    return np.asarray(feats, dtype=np.float32)
