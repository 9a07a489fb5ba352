# rocket_run/game/audio.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
import pygame
from .config import SOUNDS
from .state import GameEvent


class SoundBoard:
    """
    Plays one sound per GameEvent through pygame.mixer.
    Subscribe `play` to a GameSession; Sound.play() never blocks the frame.
    Missing files are reported once and that event stays silent.
    """
    def __init__(self, assets_dir: str | Path):
        self.assets_dir = Path(assets_dir)
        self.sounds: Dict[GameEvent, pygame.mixer.Sound] = {}
        for event in GameEvent:
            sound = self._load(event)
            if sound is not None:
                self.sounds[event] = sound

    def _load(self, event: GameEvent) -> Optional[pygame.mixer.Sound]:
        file_name, volume = SOUNDS[event.value]
        path = self.assets_dir / file_name
        if not path.exists():
            print(f"[audio] missing {path}, '{event.value}' will be silent")
            return None
        sound = pygame.mixer.Sound(str(path))
        sound.set_volume(volume)
        return sound

    def play(self, event: GameEvent):
        sound = self.sounds.get(event)
        if sound is not None:
            sound.play()
