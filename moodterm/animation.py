"""Full-screen animations: boot-up splash, screen wipe, ASCII wave, fireworks."""

from __future__ import annotations

import itertools
import logging
import math
import time
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import pygame

from moodterm.fireworks import Fireworks
from moodterm.mood import MoodManager
from moodterm.state import StateBox, TerminalState

log = logging.getLogger(__name__)

FONT_PATH = Path("Assets/Fonts/consolas.ttf")

SPLASH_ART = (
    "===============================",
    "       MOOD TERMINAL 1.0",
    "===============================",
    "",
    "",
    "",
    "Initializing...",
)

BOOT_SPEED = 28.0
TOTAL_BARS = 30
CELL_SIZE = 25
SPLASH_TEXT_SIZE = 30
WAVE_TEXT_SIZE = 18
WAVE_SPACING_X = 10.0
WAVE_SPACING_Y = 8.0


class Animation(Enum):
    """The animation currently being played."""

    STARTUP = "startup"
    CLEAR = "clear"
    ASCII_WAVE = "ascii_wave"
    FIREWORKS = "fireworks"


def progress_bar(progress: float) -> str:
    """Text of the boot progress line, e.g. ``[###---...] 10%``."""
    filled = max(0, min(TOTAL_BARS, int(progress / 100.0 * TOTAL_BARS)))
    return f"[{'#' * filled}{'-' * (TOTAL_BARS - filled)}] {int(progress)}%"


def wave_positions(width: int, height: int, time: float) -> list[tuple[float, float]]:
    """Top-left positions of the ``~`` characters of the wave at ``time``."""
    cols = int(width / WAVE_SPACING_X)
    rows = int(height / WAVE_SPACING_Y)
    positions = []
    for x in range(cols):
        wave = math.sin(time * 4 / 1.2 + x * 0.1)
        y = int((wave + 1.0) * 0.5 * (rows - 1))
        positions.append((x * WAVE_SPACING_X, y * WAVE_SPACING_Y))
    return positions


class AnimationManager:
    """Runs one animation at a time and hands control back when it ends.

    ``update`` only draws; presenting the frame is left to the caller.
    Passing ``None`` as the surface advances the animation without drawing.
    """

    def __init__(
        self,
        width: int,
        height: int,
        state: StateBox,
        moods: MoodManager,
        fireworks: Fireworks,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.width = width
        self.height = height
        self.state = state
        self.moods = moods
        self.fireworks = fireworks
        self.active: Animation | None = None
        self.progress = 0.0
        self.cols = width // CELL_SIZE
        self.rows = height // CELL_SIZE
        self.clear_frame = 0
        self.cleared: set[tuple[int, int]] = set()
        self._clock = clock
        self._last_tick = clock()
        self._wave_start = clock()
        self._fonts: dict[int, pygame.font.Font] = {}

    def _start(self, animation: Animation) -> None:
        self.state.value = TerminalState.ANIMATION
        self.active = animation

    def start_boot_up(self) -> None:
        """Show the splash screen with its progress bar."""
        self._start(Animation.STARTUP)

    def start_clear_screen(self) -> None:
        """Wipe the screen diagonally from the top-left corner."""
        self._start(Animation.CLEAR)
        self.clear_frame = 0
        self.cleared = set()

    def start_ascii_wave(self) -> None:
        """Show a sine wave of ``~`` characters."""
        self._start(Animation.ASCII_WAVE)

    def start_fireworks(self) -> None:
        """Show the fireworks."""
        self._start(Animation.FIREWORKS)

    def update(self, surface: pygame.Surface | None) -> None:
        """Advance the active animation by one frame."""
        if surface is not None:
            surface.fill(self.moods.background_color)

        if self.active is Animation.STARTUP:
            self._update_boot(surface)
        elif self.active is Animation.CLEAR:
            self._update_clear(surface)
        elif self.active is Animation.ASCII_WAVE:
            self._draw_wave(surface, self._clock() - self._wave_start)
        elif self.active is Animation.FIREWORKS:
            self.fireworks.update(self.moods.text_color, surface)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(str(FONT_PATH), size)
            except (OSError, pygame.error):
                log.error("Failed to load font %s", FONT_PATH)
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _blit_text(self, surface: pygame.Surface, size: int, text: str, pos: tuple[float, float]) -> None:
        rendered = self._font(size).render(text, True, self.moods.text_color)
        surface.blit(rendered, pos)

    def _update_boot(self, surface: pygame.Surface | None) -> None:
        x = self.width / 2 - 275
        y = 100
        for line in SPLASH_ART:
            if surface is not None:
                self._blit_text(surface, SPLASH_TEXT_SIZE, line, (x, y))
            y += 25

        now = self._clock()
        self.progress += (now - self._last_tick) * BOOT_SPEED
        self._last_tick = now

        if surface is not None:
            self._blit_text(surface, SPLASH_TEXT_SIZE, progress_bar(self.progress), (x, y + 10))

        if self.progress >= 100.0:
            self.active = None
            self.state.value = TerminalState.TERMINAL
            self._last_tick = self._clock()
            self.progress = 0.0
            self.start_clear_screen()

    def _update_clear(self, surface: pygame.Surface | None) -> None:
        color = self.moods.text_color
        for y, x in itertools.product(range(self.rows), range(self.cols)):
            if x + y <= self.clear_frame:
                self.cleared.add((x, y))
                if surface is not None:
                    rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                    pygame.draw.rect(surface, color, rect)

        self.clear_frame += 2

        if self.clear_frame > self.cols + self.rows:
            self.active = None
            self.state.value = TerminalState.TERMINAL
            self.cleared.clear()

    def _draw_wave(self, surface: pygame.Surface | None, elapsed: float) -> None:
        if surface is None:
            return
        for pos in wave_positions(surface.get_width(), surface.get_height(), elapsed):
            self._blit_text(surface, WAVE_TEXT_SIZE, "~", pos)