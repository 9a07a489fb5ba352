# rocket_run/game/simulation.py
"""
One frame of gameplay.

Phase order matters:
  terminal check -> jump -> chasms -> collectables -> horizontal move
  -> vertical move / plummet -> goal -> world_x refresh -> death check

Chasm and collectable tests run before the move and therefore see the
world_x computed at the end of the previous frame.
"""
from __future__ import annotations
import math
from typing import List

from .config import (
    WIDTH, HEIGHT, FLOOR_Y, WALK_STEP, FALL_STEP, PLUMMET_STEP, GAME_OVER_DROP,
    SCROLL_LEFT_BOUND, SCROLL_RIGHT_BOUND, COLLECT_RADIUS, GOAL_REACH_DISTANCE,
    REPEAT_FRAME_EFFECTS,
)
from .contact import find_support
from .state import GameEvent, Intents, SessionState


def apply_terminal_state(state: SessionState, repeat_frame_effects: bool = REPEAT_FRAME_EFFECTS) -> bool:
    """Returns True when the run is over and the rest of the frame must be skipped."""
    if state.game_over:
        # the robot keeps dropping out of view under the game-over banner
        if repeat_frame_effects or state.game_over_frames == 0:
            state.character.y += GAME_OVER_DROP
        state.game_over_frames += 1
        return True
    if state.level_complete:
        return True
    return False


def apply_jump(state: SessionState, events: List[GameEvent]):
    if state.character.try_jump():
        events.append(GameEvent.JUMP)


def check_chasms(state: SessionState):
    ch = state.character
    if not ch.on_floor_level:
        return
    for chasm in state.layout.chasms:
        if chasm.contains(ch.world_x):
            ch.plummeting = True


def check_collectables(state: SessionState, events: List[GameEvent]):
    ch = state.character
    for item in state.layout.collectables:
        if item.found:
            continue
        if math.hypot(ch.world_x - item.x, ch.y - item.y) < COLLECT_RADIUS:
            item.found = True
            state.score += 1
            events.append(GameEvent.COLLECT)


def move_horizontal(state: SessionState):
    """Walk inside [20%, 80%] of the screen; past that the background scrolls."""
    ch = state.character
    if ch.moving_left:
        if ch.x > WIDTH * SCROLL_LEFT_BOUND:
            ch.x -= WALK_STEP
        else:
            state.scroll_offset += WALK_STEP
    if ch.moving_right:
        if ch.x < WIDTH * SCROLL_RIGHT_BOUND:
            ch.x += WALK_STEP
        else:
            state.scroll_offset -= WALK_STEP


def move_vertical(state: SessionState, events: List[GameEvent],
                  repeat_frame_effects: bool = REPEAT_FRAME_EFFECTS):
    ch = state.character
    if ch.y < FLOOR_Y:
        if find_support(state.layout.platforms, ch) is None:
            ch.y += FALL_STEP
            ch.falling = True
    else:
        ch.falling = False

    if ch.plummeting:
        ch.y += PLUMMET_STEP
        ch.plummet_frames += 1
        if repeat_frame_effects or ch.plummet_frames == 1:
            events.append(GameEvent.LIFE_LOST)


def check_goal(state: SessionState, events: List[GameEvent]):
    goal = state.layout.goal
    if goal.reached:
        return
    ch = state.character
    if abs(ch.world_x - goal.x) < GOAL_REACH_DISTANCE:
        goal.reached = True
        ch.falling = True
        events.append(GameEvent.LEVEL_COMPLETE)


def check_death(state: SessionState) -> bool:
    """Character fully off-screen: lose a life, respawn if any remain. Returns True on death."""
    if state.character.y != HEIGHT:
        return False
    state.lives -= 1
    if state.lives > 0:
        state.respawn()
    return True


def step_frame(state: SessionState,
               intents: Intents,
               jump_pressed: bool = False,
               repeat_frame_effects: bool = REPEAT_FRAME_EFFECTS) -> List[GameEvent]:
    """
    Advance `state` by one frame and return the events emitted during it.
    `jump_pressed` is the edge of the jump key (True only on the press frame).
    """
    events: List[GameEvent] = []
    ch = state.character
    ch.moving_left = intents.move_left
    ch.moving_right = intents.move_right

    if apply_terminal_state(state, repeat_frame_effects):
        return events

    if jump_pressed:
        apply_jump(state, events)

    check_chasms(state)
    check_collectables(state, events)

    move_horizontal(state)
    move_vertical(state, events, repeat_frame_effects)
    check_goal(state, events)

    ch.sync_world_x(state.scroll_offset)

    check_death(state)
    return events
