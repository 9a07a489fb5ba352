# rocket_run/game/render.py
from __future__ import annotations
import pygame
from .config import (
    WIDTH, HEIGHT, FLOOR_Y,
    COLOR_SKY, COLOR_GROUND, COLOR_FG, COLOR_CLOUD, COLOR_MOUNTAIN, COLOR_MOUNTAIN_CAP,
    COLOR_TRUNK, COLOR_LEAVES, COLOR_CHASM, COLOR_CHASM_LAVA, COLOR_COLLECTABLE,
    COLOR_PLAT, COLOR_ROCKET, COLOR_FLAME, COLOR_CHAR_BODY, COLOR_CHAR_HEAD, COLOR_DANGER,
)
from .state import Snapshot, SessionStatus


def _draw_scenery(surf: pygame.Surface, snap: Snapshot, ox: int):
    for cx, cy in snap.clouds:
        x = cx + ox
        pygame.draw.ellipse(surf, COLOR_CLOUD, (x, cy - 30, 120, 60))
        pygame.draw.ellipse(surf, COLOR_CLOUD, (x + 50, cy - 45, 100, 70))

    for mx, my in snap.mountains:
        x = mx + ox
        pygame.draw.polygon(surf, COLOR_MOUNTAIN, [(x - 50, my), (x + 100, my - 250), (x + 250, my)])
        pygame.draw.polygon(surf, COLOR_MOUNTAIN_CAP,
                            [(x + 60, my - 180), (x + 100, my - 250), (x + 140, my - 180)])

    for tx in snap.trees_x:
        x = tx + ox
        pygame.draw.rect(surf, COLOR_TRUNK, (x + 85, FLOOR_Y - 100, 30, 100))
        pygame.draw.polygon(surf, COLOR_LEAVES, [(x + 25, FLOOR_Y - 100), (x + 100, FLOOR_Y - 200),
                                                 (x + 175, FLOOR_Y - 100)])
        pygame.draw.polygon(surf, COLOR_LEAVES, [(x, FLOOR_Y - 50), (x + 100, FLOOR_Y - 150),
                                                 (x + 200, FLOOR_Y - 50)])


def _draw_hazards_and_items(surf: pygame.Surface, snap: Snapshot, ox: int):
    for x, width in snap.chasms:
        pygame.draw.rect(surf, COLOR_CHASM, (x + ox, FLOOR_Y, width, HEIGHT - FLOOR_Y))
        pygame.draw.rect(surf, COLOR_CHASM_LAVA, (x + ox, FLOOR_Y + 110, width, HEIGHT - FLOOR_Y - 110))

    for x, y, size, found in snap.collectables:
        if not found:
            pygame.draw.circle(surf, COLOR_COLLECTABLE, (x + ox, y), size // 2)

    for x, y, length, thickness in snap.platforms:
        pygame.draw.rect(surf, COLOR_PLAT, (x + ox, y, length, thickness), border_radius=4)


def _draw_rocket(surf: pygame.Surface, snap: Snapshot, ox: int):
    x = snap.goal_x + ox
    base = FLOOR_Y - (60 if snap.goal_reached else 0)   # lifts off once reached
    pygame.draw.rect(surf, COLOR_ROCKET, (x - 20, base - 120, 40, 120))
    pygame.draw.polygon(surf, COLOR_ROCKET, [(x - 20, base - 120), (x, base - 160), (x + 20, base - 120)])
    pygame.draw.polygon(surf, COLOR_DANGER, [(x - 20, base - 30), (x - 40, base), (x - 20, base)])
    pygame.draw.polygon(surf, COLOR_DANGER, [(x + 20, base - 30), (x + 40, base), (x + 20, base)])
    if snap.goal_reached:
        pygame.draw.polygon(surf, COLOR_FLAME, [(x - 15, base), (x, base + 50), (x + 15, base)])


def _draw_character(surf: pygame.Surface, snap: Snapshot):
    x, y = snap.x, snap.y
    airborne = snap.pose.startswith("jump")
    # legs tuck up while in the air
    leg_h = 6 if airborne else 12
    pygame.draw.rect(surf, COLOR_CHAR_BODY, (x - 9, y - 12 - 30, 18, 30), border_radius=2)
    pygame.draw.rect(surf, COLOR_CHAR_HEAD, (x - 13, y - 42 - 18, 26, 18), border_radius=5)
    pygame.draw.rect(surf, COLOR_CHAR_BODY, (x - 7, y - leg_h, 5, leg_h))
    pygame.draw.rect(surf, COLOR_CHAR_BODY, (x + 2, y - leg_h, 5, leg_h))
    if snap.pose.endswith("left"):
        eye = (x - 6, y - 52)
    elif snap.pose.endswith("right"):
        eye = (x + 6, y - 52)
    else:
        eye = (x, y - 52)
    pygame.draw.circle(surf, (0, 0, 0), eye, 2)


def draw_hud(surf: pygame.Surface, snap: Snapshot, font: pygame.font.Font, big_font: pygame.font.Font):
    surf.blit(font.render(f"Score: {snap.score}", True, COLOR_FG), (20, 12))
    surf.blit(font.render("Lives:", True, COLOR_FG), (WIDTH - 200, 12))
    for i in range(max(0, snap.lives)):
        pygame.draw.circle(surf, COLOR_DANGER, (WIDTH - 110 + i * 30, 24), 10)

    msg = None
    if snap.status is SessionStatus.GAME_OVER:
        msg = "Game over. Press R to restart."
    elif snap.status is SessionStatus.LEVEL_COMPLETE:
        msg = "Level complete. Press R to restart."
    if msg:
        txt = big_font.render(msg, True, COLOR_FG)
        surf.blit(txt, (WIDTH // 2 - txt.get_width() // 2, HEIGHT // 2 - 180))


def draw_world(surf: pygame.Surface, snap: Snapshot):
    """Everything except the HUD. World entities are shifted by the scroll offset."""
    ox = snap.scroll_offset
    surf.fill(COLOR_SKY)
    pygame.draw.rect(surf, COLOR_GROUND, (0, FLOOR_Y, WIDTH, HEIGHT - FLOOR_Y))
    _draw_scenery(surf, snap, ox)
    _draw_hazards_and_items(surf, snap, ox)
    _draw_rocket(surf, snap, ox)
    _draw_character(surf, snap)
