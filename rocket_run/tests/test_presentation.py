"""
Tests for the pygame-facing pieces: key mapping, renderer, sound board.
"""
from collections import defaultdict

import pygame

from rocket_run.game.audio import SoundBoard
from rocket_run.game.config import COLOR_SKY, COLOR_GROUND, HEIGHT, WIDTH
from rocket_run.game.game import parse_args, read_intents
from rocket_run.game.render import draw_world
from rocket_run.game.state import GameEvent, Intents


def test_read_intents():
    pressed = defaultdict(bool, {pygame.K_d: True, pygame.K_SPACE: True})
    assert read_intents(pressed) == Intents(move_left=False, move_right=True, jump=True)

    pressed = defaultdict(bool, {pygame.K_LEFT: True})
    assert read_intents(pressed) == Intents(move_left=True)


def test_parse_args():
    args = parse_args(["--lives", "5", "--single-shot-effects", "--mute"])
    assert args.lives == 5
    assert args.single_shot_effects
    assert args.mute
    assert not args.log_events


def test_draw_world(session):
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_world(surf, session.snapshot())
    assert tuple(surf.get_at((0, 0)))[:3] == COLOR_SKY
    assert tuple(surf.get_at((5, HEIGHT - 1)))[:3] == COLOR_GROUND


def test_sound_board_missing_files(tmp_path, capsys):
    board = SoundBoard(tmp_path)
    assert board.sounds == {}
    assert "missing" in capsys.readouterr().out
    board.play(GameEvent.JUMP)   # silent, no error
