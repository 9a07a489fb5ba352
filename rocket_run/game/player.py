# rocket_run/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from .config import START_X, FLOOR_Y, JUMP_HEIGHT


@dataclass
class Character:
    """
    The robot, tracked in two frames of reference:
    - x, y     : screen-space (what the renderer draws)
    - world_x  : x - scroll offset, used by every collision test
    world_x is only refreshed by sync_world_x(), once per frame.
    """
    x: int
    y: int
    world_x: int
    moving_left: bool = False
    moving_right: bool = False
    falling: bool = False
    plummeting: bool = False
    plummet_frames: int = 0

    @classmethod
    def spawn(cls, scroll_offset: int = 0) -> "Character":
        return cls(x=START_X, y=FLOOR_Y, world_x=START_X - scroll_offset)

    @property
    def airborne(self) -> bool:
        return self.y < FLOOR_Y

    @property
    def on_floor_level(self) -> bool:
        return self.y >= FLOOR_Y

    def sync_world_x(self, scroll_offset: int):
        self.world_x = self.x - scroll_offset

    def can_jump(self) -> bool:
        # no air jumps, and a plummet is final
        return not self.falling and not self.plummeting

    def try_jump(self) -> bool:
        """Instant rise by JUMP_HEIGHT. Returns True if performed."""
        if self.can_jump():
            self.y -= JUMP_HEIGHT
            return True
        return False

    @property
    def pose(self) -> str:
        if self.moving_left and self.falling:
            return "jump_left"
        if self.moving_right and self.falling:
            return "jump_right"
        if self.moving_left:
            return "walk_left"
        if self.moving_right:
            return "walk_right"
        if self.falling or self.plummeting:
            return "jump_front"
        return "front"
