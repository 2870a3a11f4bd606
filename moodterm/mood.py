"""Terminal moods and the colours they give the screen."""

from __future__ import annotations

import math
from enum import Enum

Color = tuple[int, int, int]


class Mood(Enum):
    """A mood, valued by its display name."""

    HAPPY = "Happy"
    SAD = "Sad"
    ANGRY = "Angry"
    EXCITED = "Excited"
    CRAZY = "Crazy"
    NONE = "None"

    @classmethod
    def from_name(cls, name: str) -> "Mood":
        """Look up a mood by name, ignoring case."""
        wanted = name.lower()
        for mood in cls:
            if mood.value.lower() == wanted:
                return mood
        raise ValueError(f"unknown mood: {name!r}")


# (text colour, background colour); CRAZY is animated and keeps whatever it had.
PALETTE: dict[Mood, tuple[Color, Color]] = {
    Mood.NONE: ((255, 255, 255), (10, 10, 10)),
    Mood.HAPPY: ((255, 223, 88), (30, 30, 15)),
    Mood.SAD: ((135, 206, 250), (15, 20, 35)),
    Mood.ANGRY: ((255, 90, 90), (40, 10, 10)),
    Mood.EXCITED: ((255, 105, 180), (30, 0, 40)),
}


class MoodManager:
    """Tracks the current mood and the colours derived from it."""

    def __init__(self) -> None:
        self.current = Mood.NONE
        self.text_color, self.background_color = PALETTE[Mood.NONE]

    @property
    def mood(self) -> str:
        """Display name of the current mood."""
        return self.current.value

    def update(self, elapsed: float) -> None:
        """Advance animated colours; ``elapsed`` is seconds since start."""
        if self.current is not Mood.CRAZY:
            return
        r = int(math.sin(elapsed * 2.0) * 127 + 128)
        g = int(math.sin(elapsed * 3.0 + 2.0) * 127 + 128)
        b = int(math.sin(elapsed * 1.5 + 4.0) * 127 + 128)
        self.text_color = (r, g, b)
        self.background_color = (255 - r, 255 - g, 255 - b)

    def set_mood(self, name: str) -> bool:
        """Switch to the named mood; return False if no such mood exists."""
        try:
            mood = Mood.from_name(name)
        except ValueError:
            return False
        self.current = mood
        if mood in PALETTE:
            self.text_color, self.background_color = PALETTE[mood]
        return True

    def available_moods(self) -> list[str]:
        """Names of all moods, in display order."""
        return [mood.value for mood in Mood]