"""
Tests for the GameSession lifecycle.
"""
import copy
import dataclasses

import pytest

from rocket_run.game.config import FLOOR_Y, START_X, HEIGHT
from rocket_run.game.level import DEFAULT_LEVEL, LayoutError
from rocket_run.game.session import GameSession
from rocket_run.game.state import GameEvent, Intents, SessionStatus

NOOP = Intents()
JUMP = Intents(jump=True)


def put_in_chasm(session: GameSession):
    ch = session.state.character
    ch.x = 700
    ch.sync_world_x(session.state.scroll_offset)


class TestStart:

    def test_initial_state(self, session):
        assert session.status is SessionStatus.PLAYING
        assert session.state.lives == 3
        assert session.state.score == 0
        ch = session.state.character
        assert (ch.x, ch.y, ch.world_x) == (START_X, FLOOR_Y, START_X)

    def test_invalid_table_is_fatal(self):
        table = copy.deepcopy(DEFAULT_LEVEL)
        table["chasms"] = [(680, 0)]
        with pytest.raises(LayoutError):
            GameSession(table=table)

    def test_lives_must_be_positive(self):
        with pytest.raises(AssertionError):
            GameSession(lives=0)


class TestJumpEdge:

    def test_held_jump_fires_once(self, session):
        jumps = 0
        for _ in range(120):
            jumps += session.step(JUMP).count(GameEvent.JUMP)
        assert jumps == 1
        # landed by now, still holding the key
        assert session.state.character.y == FLOOR_Y
        assert not session.state.character.falling

    def test_release_rearms_jump(self, session):
        session.step(JUMP)
        for _ in range(60):
            session.step(NOOP)
        assert session.step(JUMP) == [GameEvent.JUMP]

    def test_jump_ignored_when_level_complete(self, session):
        session.state.layout.goal.reached = True
        assert session.step(JUMP) == []
        assert session.state.character.y == FLOOR_Y


class TestListeners:

    def test_listener_receives_events(self, session):
        heard = []
        session.subscribe(heard.append)
        session.step(JUMP)
        assert heard == [GameEvent.JUMP]

    def test_every_listener_is_called(self, session):
        a, b = [], []
        session.subscribe(a.append)
        session.subscribe(b.append)
        session.step(JUMP)
        assert a == b == [GameEvent.JUMP]


class TestLifecycle:

    def test_plummet_costs_one_life(self, session):
        put_in_chasm(session)
        lost = 0
        for _ in range(16):
            lost += session.step(NOOP).count(GameEvent.LIFE_LOST)
        assert lost == 16
        assert session.state.lives == 2
        assert session.status is SessionStatus.PLAYING
        assert session.state.character.y == FLOOR_Y

    def test_single_shot_effects(self):
        session = GameSession(repeat_frame_effects=False)
        put_in_chasm(session)
        lost = 0
        for _ in range(16):
            lost += session.step(NOOP).count(GameEvent.LIFE_LOST)
        assert lost == 1
        assert session.state.lives == 2

    def test_three_deaths_end_the_game(self, session):
        for _ in range(3):
            put_in_chasm(session)
            for _ in range(16):
                session.step(NOOP)
        assert session.state.lives == 0
        assert session.status is SessionStatus.GAME_OVER

    def test_game_over_is_terminal_until_restart(self, session):
        session.state.lives = 1
        session.state.character.y = HEIGHT
        session.step(NOOP)
        assert session.status is SessionStatus.GAME_OVER
        for _ in range(30):
            session.step(Intents(move_right=True, jump=True))
        assert session.status is SessionStatus.GAME_OVER

        session.restart()
        assert session.status is SessionStatus.PLAYING
        assert session.state.lives == 3
        assert session.state.score == 0
        assert session.frame == 0

    def test_restart_from_level_complete(self, session):
        session.state.score = 5
        session.state.layout.goal.reached = True
        assert session.status is SessionStatus.LEVEL_COMPLETE
        session.restart()
        assert session.status is SessionStatus.PLAYING
        assert session.state.score == 0
        assert not session.state.layout.goal.reached

    def test_game_over_takes_precedence(self, session):
        session.state.lives = 0
        session.state.layout.goal.reached = True
        assert session.status is SessionStatus.GAME_OVER


class TestSnapshot:

    def test_reflects_state(self, session):
        session.step(Intents(move_right=True))
        snap = session.snapshot()
        assert snap.x == START_X + 5
        assert snap.world_x == START_X + 5
        assert snap.pose == "walk_right"
        assert snap.scroll_offset == 0
        assert snap.lives == 3
        assert snap.score == 0
        assert snap.status is SessionStatus.PLAYING
        assert len(snap.collectables) == 9
        assert snap.goal_x == 2500 and not snap.goal_reached
        assert snap.events == ()

    def test_carries_last_frame_events(self, session):
        session.step(JUMP)
        snap = session.snapshot()
        assert snap.events == (GameEvent.JUMP,)
        assert snap.pose == "jump_front"

    def test_is_read_only(self, session):
        snap = session.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.score = 10
