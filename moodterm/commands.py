"""Parsing and running of the commands typed into the terminal."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime

from moodterm.animation import AnimationManager
from moodterm.audio import AudioManager
from moodterm.history import History
from moodterm.mood import MoodManager
from moodterm.state import StateBox, TerminalState

log = logging.getLogger(__name__)

PROMPT = "MoodTerminal>"
VIRUS_STEP = 0.04

COMMANDS: dict[str, str] = {
    "help": "Displays the list of available commands.",
    "clear": "Clears the terminal screen.",
    "exit": "Exits the terminal.",
    "mood": "Gets the mood for the terminal.",
    "moodvirus": "Randomly changes the mood of the terminal.",
    "moodlist": "Displays the list of available moods.",
    "print": "Prints the provided text to the terminal.",
    "time": "Displays the current time.",
    "pong": "Starts the pong game.",
    "asciiwave": "Starts the ASCII wave animation.",
    "fireworks": "Starts the fireworks animation.",
}


def split_input(text: str) -> list[str]:
    """Split a command line into whitespace-separated words."""
    return text.split()


def format_time(moment: datetime) -> str:
    """Format as ``day-month-year hour:minute:second`` without zero padding."""
    return (
        f"{moment.day}-{moment.month}-{moment.year} "
        f"{moment.hour}:{moment.minute}:{moment.second}"
    )


class CommandManager:
    """Runs typed commands, writing their output into the history."""

    def __init__(
        self,
        history: History,
        moods: MoodManager,
        animations: AnimationManager,
        audio: AudioManager,
        state: StateBox,
        rng: random.Random | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.history = history
        self.moods = moods
        self.animations = animations
        self.audio = audio
        self.state = state
        self.rng = rng or random.Random()
        self.now = now
        self.virus_active = False
        self.virus_timer = float(self.rng.randint(10, 30))
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "help": self._help,
            "clear": self._clear,
            "exit": self._exit,
            "mood": self._mood,
            "moodvirus": self._mood_virus,
            "moodlist": self._mood_list,
            "print": self._print,
            "time": self._time,
            "pong": self._pong,
            "asciiwave": self._ascii_wave,
            "fireworks": self._fireworks,
        }

    def execute(self, command: str) -> None:
        """Echo and run one command line."""
        self.history.add(PROMPT + command)
        parts = split_input(command)
        name = parts[0].lower() if parts else ""
        args = parts[1:]
        log.debug("Command: %s", name)

        handler = self._handlers.get(name)
        if handler is None:
            self._error(f"Unknown command: {name}")
        else:
            handler(args)

        self.history.add("\n")

    def update(self) -> None:
        """Advance the mood virus; when its timer runs out, switch mood at random."""
        if not self.virus_active:
            return
        self.virus_timer -= VIRUS_STEP
        if self.virus_timer > 0:
            return
        before = self.moods.mood
        available = self.moods.available_moods()
        while self.moods.mood == before:
            self.moods.set_mood(self.rng.choice(available))
        self.history.add(
            f"Mood Virus changed the mood from '{before}' to '{self.moods.mood}'"
        )
        self.virus_timer = float(self.rng.randint(10, 30))

    def _error(self, message: str) -> None:
        log.error("Error: %s", message)
        self.history.add(f"Error: {message}")
        self.audio.play("error")

    def _accepts_no_args(self, label: str, args: list[str]) -> bool:
        if args:
            self._error(f"{label} command does not accept any arguments.")
            return False
        return True

    def _help(self, args: list[str]) -> None:
        if len(args) > 1:
            self._error("Help command accepts only one argument.")
            return
        if args:
            return
        for name, description in COMMANDS.items():
            self.history.add(f"{name} - {description}")
        self.history.add("\n")
        self.history.add("For more information about each command, type HELP + command.")

    def _clear(self, args: list[str]) -> None:
        if not self._accepts_no_args("Clear", args):
            return
        self.history.clear()
        self.animations.start_clear_screen()

    def _exit(self, args: list[str]) -> None:
        if not self._accepts_no_args("Exit", args):
            return
        self.history.add("Exiting the terminal...")
        raise SystemExit(0)

    def _mood(self, args: list[str]) -> None:
        if len(args) > 1:
            self._error("Mood command accepts only one argument.")
            return
        if not args:
            self.history.add(f"Current mood: {self.moods.mood}")
            return

        wanted = args[0]
        before = self.moods.mood
        exists = self.moods.set_mood(wanted)
        after = self.moods.mood

        if before != after:
            self.history.add(f"Mood changed from {before} to {after}")
        elif exists:
            self.history.add(f"Mood is already set to '{wanted}'")
        else:
            self.history.add(f"Mood '{wanted}' doesn't exist!")

    def _mood_virus(self, args: list[str]) -> None:
        if self._accepts_no_args("MoodVirus", args):
            self.virus_active = not self.virus_active

    def _mood_list(self, args: list[str]) -> None:
        if not self._accepts_no_args("MoodList", args):
            return
        self.history.add("Available moods:")
        for mood in self.moods.available_moods():
            self.history.add(mood)

    def _print(self, args: list[str]) -> None:
        if not args:
            self._error("No arguments provided for print command.")
            return
        self.history.add("".join(f"{arg} " for arg in args))

    def _time(self, args: list[str]) -> None:
        if self._accepts_no_args("Time", args):
            self.history.add(f"Current time: {format_time(self.now())}")

    def _pong(self, args: list[str]) -> None:
        if self._accepts_no_args("Pong", args):
            self.state.value = TerminalState.PONG

    def _ascii_wave(self, args: list[str]) -> None:
        if self._accepts_no_args("AsciiWave", args):
            self.animations.start_ascii_wave()

    def _fireworks(self, args: list[str]) -> None:
        if self._accepts_no_args("Fireworks", args):
            self.animations.start_fireworks()