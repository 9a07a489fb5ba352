# rocket_run/game/contact.py
from __future__ import annotations
from typing import Iterable, Optional
from .level import Platform
from .player import Character


def check_contact(platform: Platform, character: Character) -> bool:
    """
    True if the character stands on `platform` at its current world_x / y.
    Landing side effect: clears `character.falling` on contact, nothing otherwise.
    """
    if platform.supports(character.world_x, character.y):
        character.falling = False
        return True
    return False


def find_support(platforms: Iterable[Platform], character: Character) -> Optional[Platform]:
    """First platform in contact with the character, or None. Stops at the first hit."""
    for platform in platforms:
        if check_contact(platform, character):
            return platform
    return None
