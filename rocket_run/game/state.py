# rocket_run/game/state.py
"""
Runtime state shared by the simulation and the session.

SessionState is the single mutable aggregate for one run; Snapshot is the
read-only view handed to presentation code after each frame.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .config import START_LIVES
from .level import WorldLayout, build_layout
from .player import Character


class GameEvent(Enum):
    """Fire-and-forget notifications for the audio layer."""
    JUMP = "jump"
    COLLECT = "collect"
    LIFE_LOST = "life_lost"
    LEVEL_COMPLETE = "level_complete"


class SessionStatus(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"


@dataclass(frozen=True)
class Intents:
    """Input snapshot for one frame. `jump` is the held state of the jump key."""
    move_left: bool = False
    move_right: bool = False
    jump: bool = False


@dataclass
class SessionState:
    layout: WorldLayout
    character: Character
    table: Optional[Dict[str, Any]] = None
    scroll_offset: int = 0
    score: int = 0
    lives: int = START_LIVES
    game_over_frames: int = 0
    respawns: int = 0

    @classmethod
    def new(cls, table: Optional[Dict[str, Any]] = None, lives: int = START_LIVES) -> "SessionState":
        return cls(layout=build_layout(table), character=Character.spawn(), table=table, lives=lives)

    @property
    def game_over(self) -> bool:
        return self.lives < 1

    @property
    def level_complete(self) -> bool:
        return self.layout.goal.reached

    @property
    def status(self) -> SessionStatus:
        if self.game_over:
            return SessionStatus.GAME_OVER
        if self.level_complete:
            return SessionStatus.LEVEL_COMPLETE
        return SessionStatus.PLAYING

    def respawn(self):
        """Same-run reset after a non-fatal death. Lives are kept, score is not."""
        self.layout = build_layout(self.table)
        self.scroll_offset = 0
        self.character = Character.spawn(self.scroll_offset)
        self.score = 0
        self.respawns += 1


@dataclass(frozen=True)
class Snapshot:
    x: int
    y: int
    world_x: int
    pose: str
    moving_left: bool
    moving_right: bool
    falling: bool
    plummeting: bool
    scroll_offset: int
    # (x, y, size, found)
    collectables: Tuple[Tuple[int, int, int, bool], ...]
    # (x, width)
    chasms: Tuple[Tuple[int, int], ...]
    # (x, y, length, thickness)
    platforms: Tuple[Tuple[int, int, int, int], ...]
    trees_x: Tuple[int, ...]
    clouds: Tuple[Tuple[int, int], ...]
    mountains: Tuple[Tuple[int, int], ...]
    goal_x: int
    goal_reached: bool
    score: int
    lives: int
    status: SessionStatus
    events: Tuple[GameEvent, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, state: SessionState, events: Tuple[GameEvent, ...] = ()) -> "Snapshot":
        ch = state.character
        lay = state.layout
        return cls(
            x=ch.x, y=ch.y, world_x=ch.world_x, pose=ch.pose,
            moving_left=ch.moving_left, moving_right=ch.moving_right,
            falling=ch.falling, plummeting=ch.plummeting,
            scroll_offset=state.scroll_offset,
            collectables=tuple((c.x, c.y, c.size, c.found) for c in lay.collectables),
            chasms=tuple((c.x, c.width) for c in lay.chasms),
            platforms=tuple((p.x, p.y, p.length, p.thickness) for p in lay.platforms),
            trees_x=tuple(lay.trees_x),
            clouds=tuple((c.x, c.y) for c in lay.clouds),
            mountains=tuple((m.x, m.y) for m in lay.mountains),
            goal_x=lay.goal.x,
            goal_reached=lay.goal.reached,
            score=state.score,
            lives=state.lives,
            status=state.status,
            events=tuple(events),
        )
