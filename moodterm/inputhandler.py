"""Keyboard and window events for the terminal, the animations and pong."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pygame

from moodterm.audio import AudioManager
from moodterm.commands import CommandManager
from moodterm.history import History
from moodterm.pong import Pong
from moodterm.renderer import TerminalRenderer
from moodterm.state import StateBox, TerminalState

ENTER_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER})


class InputHandler:
    """Edits the command line and reacts to keys in every terminal state.

    ``closed`` becomes true once the window should close.
    """

    def __init__(
        self,
        history: History,
        commands: CommandManager,
        renderer: TerminalRenderer,
        audio: AudioManager,
        state: StateBox,
        pong: Pong,
    ) -> None:
        self.history = history
        self.commands = commands
        self.renderer = renderer
        self.audio = audio
        self.state = state
        self.pong = pong
        self.text = ""
        self.cursor_pos = 0
        self.closed = False

    def _escape(self) -> None:
        if self.state.value is TerminalState.TERMINAL:
            self.closed = True
        else:
            self.state.value = TerminalState.TERMINAL

    def _feedback(self) -> None:
        self.audio.play("typing")
        self.renderer.reset_cursor_blink()

    def _backspace(self) -> None:
        if self.text:
            self.text = self.text[:-1]
            self.cursor_pos -= 1

    def _enter(self) -> None:
        if not self.text:
            return
        entered = self.text
        self.commands.execute(entered)
        self.history.add_command(entered)
        self.text = ""
        self.cursor_pos = 0
        self.history.command_index = 0
        self.audio.play("enter")

    def _recall(self, index: int) -> None:
        self.history.command_index = index
        self.text = self.history.commands[index]
        self.cursor_pos = len(self.text)

    def _key(self, key: int) -> None:
        if key == pygame.K_BACKSPACE:
            self._backspace()
        elif key in ENTER_KEYS:
            self._enter()
        elif key == pygame.K_ESCAPE:
            self._escape()
        elif key == pygame.K_LEFT:
            if self.cursor_pos > 0:
                self.cursor_pos -= 1
        elif key == pygame.K_RIGHT:
            if self.cursor_pos < len(self.text):
                self.cursor_pos += 1
        elif key == pygame.K_UP:
            index = self.history.command_index
            if index < len(self.history.commands) - 1:
                self._recall(index + 1)
        elif key == pygame.K_DOWN:
            index = self.history.command_index
            if index > 0:
                self._recall(index - 1)
            else:
                self.text = ""
                self.cursor_pos = 0

    def poll_events(self, events: Iterable[Any]) -> None:
        """Handle events while the command line is shown."""
        for event in events:
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.TEXTINPUT:
                for character in event.text:
                    if ord(character) < 128:
                        self.add_character(character, self.cursor_pos)
                        self.cursor_pos += 1
                self._feedback()
            elif event.type == pygame.KEYDOWN:
                self._key(event.key)
                self._feedback()

    def standard_poll_events(self, events: Iterable[Any]) -> None:
        """Handle events while an animation plays: Escape leaves it."""
        for event in events:
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._escape()

    def pong_poll_events(self, events: Iterable[Any], pressed: Mapping[int, bool] | Any) -> None:
        """Handle events in pong and move paddles for the keys held in ``pressed``."""
        for event in events:
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.state.value = TerminalState.TERMINAL

        if pressed[pygame.K_w]:
            self.pong.move_paddle1(-1)
        if pressed[pygame.K_s]:
            self.pong.move_paddle1(1)
        if pressed[pygame.K_UP]:
            self.pong.move_paddle2(-1)
        if pressed[pygame.K_DOWN]:
            self.pong.move_paddle2(1)

    def add_character(self, character: str, index: int) -> None:
        """Insert ``character`` at ``index`` if the index lies within the text."""
        if 0 <= index <= len(self.text):
            self.text = self.text[:index] + character + self.text[index:]