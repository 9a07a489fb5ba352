"""
Pytest fixtures for Rocket Run tests.
"""
import os

# headless pygame for render / env tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from rocket_run.game.session import GameSession
from rocket_run.game.state import SessionState


@pytest.fixture
def state() -> SessionState:
    """Fresh default-level state, character at spawn."""
    return SessionState.new()


@pytest.fixture
def session() -> GameSession:
    return GameSession()
