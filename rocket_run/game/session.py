# rocket_run/game/session.py
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from .config import START_LIVES, REPEAT_FRAME_EFFECTS
from .level import DEFAULT_LEVEL, validate_layout
from .simulation import step_frame
from .state import GameEvent, Intents, SessionState, SessionStatus, Snapshot

EventListener = Callable[[GameEvent], None]


class GameSession:
    """
    Owns one run of the game.

    Usage:
        session = GameSession()
        session.subscribe(sound_board.play)

        while running:
            events = session.step(read_intents())
            draw(session.snapshot())

        if session.status is not SessionStatus.PLAYING:
            session.restart()   # only way out of GAME_OVER / LEVEL_COMPLETE
    """

    def __init__(self,
                 table: Optional[Dict[str, Any]] = None,
                 lives: int = START_LIVES,
                 repeat_frame_effects: bool = REPEAT_FRAME_EFFECTS):
        assert lives >= 1, "lives must be >= 1"
        self.table = DEFAULT_LEVEL if table is None else table
        validate_layout(self.table)   # LayoutError is fatal: bad level data
        self.start_lives = int(lives)
        self.repeat_frame_effects = bool(repeat_frame_effects)
        self._listeners: List[EventListener] = []
        self._jump_was_down = False
        self._last_events: List[GameEvent] = []
        self.frame = 0
        self.state: SessionState = SessionState.new(self.table, self.start_lives)

    # -------------------- Lifecycle --------------------

    def start(self):
        """Full new game: fresh layout, full lives, score 0."""
        self.state = SessionState.new(self.table, self.start_lives)
        self._jump_was_down = False
        self._last_events = []
        self.frame = 0

    def restart(self):
        self.start()

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def is_over(self) -> bool:
        return self.status is not SessionStatus.PLAYING

    # -------------------- Frame --------------------

    def subscribe(self, listener: EventListener):
        self._listeners.append(listener)

    def step(self, intents: Intents) -> List[GameEvent]:
        # jump acts on the key-down edge only
        jump_pressed = intents.jump and not self._jump_was_down
        self._jump_was_down = intents.jump
        if jump_pressed and self.is_over:
            jump_pressed = False

        events = step_frame(self.state, intents,
                            jump_pressed=jump_pressed,
                            repeat_frame_effects=self.repeat_frame_effects)
        self.frame += 1
        self._last_events = events
        for ev in events:
            for listener in self._listeners:
                listener(ev)
        return events

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state, tuple(self._last_events))
