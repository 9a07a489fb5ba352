# rocket_run/game/level.py
from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from .config import (
    WIDTH, HEIGHT, FLOOR_Y, WORLD_MIN_X, WORLD_MAX_X, PLATFORM_CONTACT_TOLERANCE
)

# Hand-authored level. Every entry is world-space; y values are measured
# relative to FLOOR_Y where that reads better (collectables, platforms).
DEFAULT_LEVEL: Dict[str, Any] = {
    "trees_x": [70, 320, 850, 1600, 2200],
    "clouds": [(100, 200), (400, 120), (750, 200), (1350, 180), (1650, 150)],
    "mountains": [(WIDTH // 2 - 120, FLOOR_Y), (WIDTH // 2 + 1400, FLOOR_Y)],
    # (x, y, size)
    "collectables": [
        (50, FLOOR_Y - 40, 40),
        (170, FLOOR_Y - 180, 40),
        (600, FLOOR_Y - 40, 40),
        (900, FLOOR_Y - 40, 40),
        (1200, FLOOR_Y - 40, 40),
        (1350, FLOOR_Y - 40, 40),
        (1700, FLOOR_Y - 40, 40),
        (2015, FLOOR_Y - 240, 40),
        (2250, FLOOR_Y - 40, 40),
    ],
    # (x, width)
    "chasms": [(680, 140), (1400, 140)],
    # (x, y, length, thickness)
    "platforms": [
        (85, FLOOR_Y - 90, 170, 20),
        (1750, FLOOR_Y - 90, 200, 20),
        (1955, FLOOR_Y - 150, 150, 20),
    ],
    "goal_x": 2500,
}


class LayoutError(Exception):
    """Raised when a level table breaks the layout invariants."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(
            f"Level layout invalid with {len(errors)} error(s): " + "; ".join(errors)
        )


@dataclass(frozen=True)
class Cloud:
    x: int
    y: int


@dataclass(frozen=True)
class Mountain:
    x: int
    y: int


@dataclass
class Collectable:
    x: int
    y: int
    size: int
    found: bool = False


@dataclass(frozen=True)
class Chasm:
    """Trigger region: a character standing inside it starts plummeting."""
    x: int
    width: int

    @property
    def right(self) -> int:
        return self.x + self.width

    def contains(self, world_x: float) -> bool:
        # both edges are solid ground
        return self.x < world_x < self.right


@dataclass(frozen=True)
class Platform:
    x: int
    y: int          # top surface
    length: int
    thickness: int

    @property
    def right(self) -> int:
        return self.x + self.length

    def supports(self, world_x: float, char_y: float) -> bool:
        """Feet strictly inside the span and at most 2px above the surface."""
        if not (self.x < world_x < self.right):
            return False
        gap = self.y - char_y
        return 0 <= gap < PLATFORM_CONTACT_TOLERANCE


@dataclass
class GoalMarker:
    x: int
    reached: bool = False


@dataclass
class WorldLayout:
    trees_x: List[int] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    mountains: List[Mountain] = field(default_factory=list)
    collectables: List[Collectable] = field(default_factory=list)
    chasms: List[Chasm] = field(default_factory=list)
    platforms: List[Platform] = field(default_factory=list)
    goal: GoalMarker = field(default_factory=lambda: GoalMarker(x=0))

    @property
    def collected(self) -> int:
        return sum(1 for c in self.collectables if c.found)

    def chasm_at(self, world_x: float) -> Optional[Chasm]:
        for ch in self.chasms:
            if ch.contains(world_x):
                return ch
        return None

    def platform_at(self, world_x: float) -> Optional[Platform]:
        """Highest platform whose span covers world_x (ignores height)."""
        best: Optional[Platform] = None
        for p in self.platforms:
            if p.x < world_x < p.right and (best is None or p.y < best.y):
                best = p
        return best


def validate_layout(table: Dict[str, Any]) -> None:
    """
    Check a level table before any entity is built.
    Collects every violation, then raises a single LayoutError.
    """
    errors: List[str] = []

    def _in_world(name: str, x: float) -> None:
        if not (WORLD_MIN_X <= x <= WORLD_MAX_X):
            errors.append(f"{name}: x={x} outside world [{WORLD_MIN_X}, {WORLD_MAX_X}]")

    def _in_screen_y(name: str, y: float) -> None:
        if not (0 <= y <= HEIGHT):
            errors.append(f"{name}: y={y} outside viewport [0, {HEIGHT}]")

    for i, x in enumerate(table.get("trees_x", [])):
        _in_world(f"trees_x[{i}]", x)
    for key in ("clouds", "mountains"):
        for i, (x, y) in enumerate(table.get(key, [])):
            _in_world(f"{key}[{i}]", x)
            _in_screen_y(f"{key}[{i}]", y)

    for i, (x, y, size) in enumerate(table.get("collectables", [])):
        name = f"collectables[{i}]"
        if size <= 0:
            errors.append(f"{name}: size must be > 0 (got {size})")
        _in_world(name, x)
        _in_screen_y(name, y)

    for i, (x, width) in enumerate(table.get("chasms", [])):
        name = f"chasms[{i}]"
        if width <= 0:
            errors.append(f"{name}: width must be > 0 (got {width})")
        _in_world(name, x)
        _in_world(name, x + width)

    for i, (x, y, length, thickness) in enumerate(table.get("platforms", [])):
        name = f"platforms[{i}]"
        if length <= 0:
            errors.append(f"{name}: length must be > 0 (got {length})")
        if thickness <= 0:
            errors.append(f"{name}: thickness must be > 0 (got {thickness})")
        if y >= FLOOR_Y:
            errors.append(f"{name}: y={y} must be above the floor ({FLOOR_Y})")
        _in_world(name, x)
        _in_world(name, x + length)
        _in_screen_y(name, y)

    if table.get("goal_x") is None:
        errors.append("goal_x is required")
    else:
        _in_world("goal_x", table["goal_x"])

    if errors:
        raise LayoutError(errors)


def build_layout(table: Optional[Dict[str, Any]] = None) -> WorldLayout:
    """Fresh entities from a (validated) table. Called on start and every respawn."""
    t = copy.deepcopy(DEFAULT_LEVEL if table is None else table)
    return WorldLayout(
        trees_x=list(t.get("trees_x", [])),
        clouds=[Cloud(x, y) for x, y in t.get("clouds", [])],
        mountains=[Mountain(x, y) for x, y in t.get("mountains", [])],
        collectables=[Collectable(x, y, size) for x, y, size in t.get("collectables", [])],
        chasms=[Chasm(x, width) for x, width in t.get("chasms", [])],
        platforms=[Platform(x, y, length, thickness)
                   for x, y, length, thickness in t.get("platforms", [])],
        goal=GoalMarker(x=t["goal_x"]),
    )


def level_extent(layout: WorldLayout) -> Tuple[int, int]:
    """(min_x, max_x) covered by gameplay entities, used for normalisation."""
    xs = [layout.goal.x]
    xs += [c.x for c in layout.collectables]
    xs += [ch.right for ch in layout.chasms]
    xs += [p.right for p in layout.platforms]
    return min(0, min(xs)), max(xs)
