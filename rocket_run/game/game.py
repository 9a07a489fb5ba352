# rocket_run/game/game.py
import sys, argparse
import pygame
from pygame import K_ESCAPE, K_r
from .config import WIDTH, HEIGHT, FPS, ASSETS_DIR, START_LIVES, DEBUG_EVENTS
from .audio import SoundBoard
from .render import draw_world, draw_hud
from .session import GameSession
from .state import Intents

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
JUMP_KEYS = (pygame.K_SPACE, pygame.K_w)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Rocket Run: walk, jump, reach the rocket.")
    p.add_argument("--lives", type=int, default=START_LIVES, help="Lives per run.")
    p.add_argument("--mute", action="store_true", help="Do not initialise audio.")
    p.add_argument("--assets", type=str, default=ASSETS_DIR,
                   help="Directory holding jump.mp3, collect.wav, life_lost.wav, level_complete.wav.")
    p.add_argument("--single-shot-effects", action="store_true",
                   help="Play the life-lost sound and the game-over drop once instead of every frame.")
    p.add_argument("--log-events", action="store_true", help="Print gameplay events to stdout.")
    return p.parse_args(argv)


def read_intents(pressed) -> Intents:
    """Key state -> intents. Jump is the held state; the session finds the press edge."""
    return Intents(
        move_left=any(pressed[k] for k in LEFT_KEYS),
        move_right=any(pressed[k] for k in RIGHT_KEYS),
        jump=any(pressed[k] for k in JUMP_KEYS),
    )


def run(argv=None):
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("Rocket Run")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 22)
    big_font = pygame.font.SysFont("jetbrainsmono", 40)

    session = GameSession(lives=args.lives, repeat_frame_effects=not args.single_shot_effects)

    if not args.mute:
        try:
            pygame.mixer.init()
        except pygame.error as e:
            print(f"[audio] mixer unavailable ({e}), running muted")
        else:
            session.subscribe(SoundBoard(args.assets).play)

    if args.log_events or DEBUG_EVENTS:
        session.subscribe(lambda ev: print(f"frame={session.frame} event={ev.value} "
                                           f"score={session.state.score} lives={session.state.lives}"))

    while True:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_r and session.is_over:
                    session.restart()

        session.step(read_intents(pygame.key.get_pressed()))

        # --- Render ---
        snap = session.snapshot()
        draw_world(screen, snap)
        draw_hud(screen, snap, font, big_font)
        pygame.display.flip()


if __name__ == "__main__":
    run()
