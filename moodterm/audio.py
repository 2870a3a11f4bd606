"""Sound effects and background noise of the terminal."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pygame

log = logging.getLogger(__name__)

DEFAULT_SOUND_DIR = Path("Assets/Sounds")

# name -> (file name, volume on a 0..100 scale)
SOUNDS: dict[str, tuple[str, float]] = {
    "typing": ("Keyboard-Click.wav", 10 / 1.5),
    "error": ("Error-Beep.wav", 13 / 1.5),
    "enter": ("Press Enter.wav", 18 / 1.5),
    "startup": ("Startup-Sound.wav", 30 / 1.5),
    "background": ("Background Noise.wav", 30 / 1.5),
}

LOOPING = frozenset({"background"})


def _load_pygame_sound(path: Path) -> Any:
    """Load a sound file through the pygame mixer, starting the mixer if needed."""
    if not path.is_file():
        raise FileNotFoundError(path)
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(str(path))


class AudioManager:
    """Loads the terminal's sounds once and plays them by name.

    A sound that cannot be loaded is reported and then stays silent.
    """

    def __init__(
        self,
        sound_dir: Path | str = DEFAULT_SOUND_DIR,
        loader: Callable[[Path], Any] | None = None,
    ) -> None:
        load = loader or _load_pygame_sound
        directory = Path(sound_dir)
        self.sounds: dict[str, Any] = {}
        for name, (filename, volume) in SOUNDS.items():
            try:
                sound = load(directory / filename)
            except (OSError, pygame.error) as exc:
                log.error("Error loading %s sound: %s", name, exc)
                continue
            sound.set_volume(volume / 100.0)
            self.sounds[name] = sound

    def play(self, sound: str) -> bool:
        """Play the named sound; return whether anything was played."""
        if sound not in SOUNDS:
            raise ValueError(f"Unknown sound: {sound}")
        loaded = self.sounds.get(sound)
        if loaded is None:
            return False
        loaded.play(loops=-1 if sound in LOOPING else 0)
        return True