"""Top-level modes of the terminal and a shared, mutable holder for them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TerminalState(Enum):
    """What the main loop is currently showing."""

    TERMINAL = auto()
    ANIMATION = auto()
    PONG = auto()


@dataclass
class StateBox:
    """A mutable cell holding the current state, shared between components."""

    value: TerminalState = TerminalState.TERMINAL