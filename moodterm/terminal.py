"""The terminal window and its main loop."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterable, Sequence
from typing import Any

import pygame

from moodterm.animation import AnimationManager
from moodterm.audio import AudioManager
from moodterm.commands import CommandManager
from moodterm.fireworks import Fireworks
from moodterm.history import History
from moodterm.inputhandler import InputHandler
from moodterm.mood import MoodManager
from moodterm.pong import Pong
from moodterm.renderer import TerminalRenderer
from moodterm.state import StateBox, TerminalState

WIDTH = 1200
HEIGHT = 600
FRAME_RATE = 60
TITLE = "Mood Terminal"


class Terminal:
    """Wires all components together and runs them frame by frame."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        audio: AudioManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.state = StateBox(TerminalState.TERMINAL)
        self.fireworks = Fireworks(width, height, self.rng)
        self.pong = Pong()
        self.audio = audio if audio is not None else AudioManager()
        self.moods = MoodManager()
        self.history = History()
        self.animations = AnimationManager(width, height, self.state, self.moods, self.fireworks)
        self.commands = CommandManager(
            self.history, self.moods, self.animations, self.audio, self.state, rng=self.rng
        )
        self.renderer = TerminalRenderer(self.history, self.moods, self.pong)
        self.input = InputHandler(
            self.history, self.commands, self.renderer, self.audio, self.state, self.pong
        )
        self._started = time.monotonic()

    def _frame(self, surface: pygame.Surface | None, events: Iterable[Any], pressed: Any) -> None:
        self.moods.update(time.monotonic() - self._started)
        self.commands.update()

        state = self.state.value
        if state is TerminalState.TERMINAL:
            self.input.poll_events(events)
            self.renderer.update()
            self.renderer.draw(self.history.lines, self.input.text, self.input.cursor_pos)
        elif state is TerminalState.ANIMATION:
            self.animations.update(surface)
            self.input.standard_poll_events(events)
        elif state is TerminalState.PONG:
            self.pong.update()
            self.input.pong_poll_events(events, pressed)
            self.renderer.draw_pong()

    def run(self) -> None:
        """Open the window, play the boot animation and loop until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            self.renderer.surface = screen
            clock = pygame.time.Clock()

            self.audio.play("startup")
            self.animations.start_boot_up()
            self.audio.play("background")

            while not self.input.closed:
                self._frame(screen, pygame.event.get(), pygame.key.get_pressed())
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the mood terminal."""
    parser = argparse.ArgumentParser(prog="moodterm", description="A terminal with moods.")
    parser.parse_args(argv)
    Terminal().run()
    return 0