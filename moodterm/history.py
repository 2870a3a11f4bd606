"""Output lines and previously entered commands of the terminal."""

from __future__ import annotations

WELCOME = "Welcome to the Mood Terminal!"


class History:
    """Holds the visible output lines and the recall list of commands.

    ``commands`` keeps a blank entry at position 0 followed by the most recent
    command first; ``command_index`` points at the entry being recalled.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.commands: list[str] = []
        self.command_index = 0

    def add(self, line: str) -> None:
        """Append a line of output."""
        self.lines.append(line)

    def add_command(self, command: str) -> None:
        """Record an entered command as the newest recallable entry."""
        if not self.commands or self.commands[0] != "":
            self.commands.insert(0, "")
        self.commands.insert(1, command)

    def clear(self) -> None:
        """Drop all output, leaving only the welcome line."""
        self.lines.clear()
        self.add(WELCOME)