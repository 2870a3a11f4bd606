import random
from collections import defaultdict

import pygame
import pytest

from moodterm.animation import AnimationManager
from moodterm.audio import AudioManager
from moodterm.commands import CommandManager, PROMPT
from moodterm.fireworks import Fireworks
from moodterm.history import History
from moodterm.inputhandler import InputHandler
from moodterm.mood import MoodManager
from moodterm.pong import Pong
from moodterm.renderer import TerminalRenderer
from moodterm.state import StateBox, TerminalState


class FakeSound:
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def set_volume(self, volume):
        self.volume = volume

    def play(self, loops=0):
        self.log.append(self.name)


@pytest.fixture
def setup():
    played = []
    audio = AudioManager(sound_dir="sounds", loader=lambda path: FakeSound(played, path.name))
    state = StateBox()
    history = History()
    moods = MoodManager()
    pong = Pong()
    fireworks = Fireworks(1200, 600, random.Random(1))
    animations = AnimationManager(1200, 600, state, moods, fireworks)
    commands = CommandManager(history, moods, animations, audio, state, rng=random.Random(1))
    renderer = TerminalRenderer(history, moods, pong, surface=None, font_path="missing-font.ttf")
    handler = InputHandler(history, commands, renderer, audio, state, pong)
    return handler, history, state, pong, played


def text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def type_line(handler, line):
    handler.poll_events([text(ch) for ch in line] + [key(pygame.K_RETURN)])


def test_typing_inserts_characters(setup):
    handler = setup[0]
    handler.poll_events([text("a"), text("b"), text("c")])
    assert handler.text == "abc"
    assert handler.cursor_pos == 3


def test_non_ascii_is_ignored(setup):
    handler = setup[0]
    handler.poll_events([text("é")])
    assert handler.text == ""
    assert handler.cursor_pos == 0


def test_backspace_removes_last_character(setup):
    handler = setup[0]
    handler.poll_events([text("x"), text("y"), key(pygame.K_BACKSPACE)])
    assert handler.text == "x"
    assert handler.cursor_pos == 1


def test_backspace_on_empty_does_nothing(setup):
    handler = setup[0]
    handler.poll_events([key(pygame.K_BACKSPACE)])
    assert (handler.text, handler.cursor_pos) == ("", 0)


def test_insert_at_cursor_after_moving_left(setup):
    handler = setup[0]
    handler.poll_events([text("a"), text("c"), key(pygame.K_LEFT), text("b")])
    assert handler.text == "abc"
    assert handler.cursor_pos == 2


def test_left_and_right_stay_within_text(setup):
    handler = setup[0]
    handler.poll_events([key(pygame.K_LEFT)])
    assert handler.cursor_pos == 0
    handler.poll_events([text("a"), key(pygame.K_RIGHT), key(pygame.K_RIGHT)])
    assert handler.cursor_pos == 1


def test_enter_runs_command_and_records_it(setup):
    handler, history, _, _, played = setup
    type_line(handler, "print hi")
    assert PROMPT + "print hi" in history.lines
    assert "hi " in history.lines
    assert history.commands == ["", "print hi"]
    assert handler.text == ""
    assert handler.cursor_pos == 0
    assert "Press Enter.wav" in played


def test_enter_on_empty_line_does_nothing(setup):
    handler, history, _, _, played = setup
    before = list(history.lines)
    handler.poll_events([key(pygame.K_RETURN)])
    assert history.lines == before
    assert "Press Enter.wav" not in played


def test_keys_play_typing_sound(setup):
    handler, _, _, _, played = setup
    handler.poll_events([text("a"), key(pygame.K_LEFT)])
    assert played.count("Keyboard-Click.wav") == 2


def test_up_and_down_recall_commands(setup):
    handler, history, _, _, _ = setup
    type_line(handler, "mood")
    type_line(handler, "time")
    handler.poll_events([key(pygame.K_UP)])
    assert handler.text == "time"
    handler.poll_events([key(pygame.K_UP)])
    assert handler.text == "mood"
    assert handler.cursor_pos == len("mood")
    handler.poll_events([key(pygame.K_UP)])
    assert handler.text == "mood"
    handler.poll_events([key(pygame.K_DOWN)])
    assert handler.text == "time"
    handler.poll_events([key(pygame.K_DOWN), key(pygame.K_DOWN)])
    assert handler.text == ""
    assert history.command_index == 0


def test_escape_in_terminal_closes(setup):
    handler = setup[0]
    handler.poll_events([key(pygame.K_ESCAPE)])
    assert handler.closed


def test_quit_event_closes(setup):
    handler = setup[0]
    handler.poll_events([pygame.event.Event(pygame.QUIT)])
    assert handler.closed


def test_exit_command_raises_system_exit(setup):
    handler, history, _, _, _ = setup
    with pytest.raises(SystemExit) as excinfo:
        type_line(handler, "exit")
    assert excinfo.value.code in (0, None)
    assert "Exiting the terminal..." in history.lines
    assert PROMPT + "exit" in history.lines


def test_pong_command_switches_state(setup):
    handler, _, state, _, _ = setup
    type_line(handler, "pong")
    assert state.value is TerminalState.PONG


def test_standard_escape_returns_to_terminal(setup):
    handler, _, state, _, _ = setup
    state.value = TerminalState.ANIMATION
    handler.standard_poll_events([key(pygame.K_ESCAPE)])
    assert state.value is TerminalState.TERMINAL
    assert not handler.closed
    handler.standard_poll_events([key(pygame.K_ESCAPE)])
    assert handler.closed


def test_pong_escape_returns_to_terminal(setup):
    handler, _, state, _, _ = setup
    state.value = TerminalState.PONG
    handler.pong_poll_events([key(pygame.K_ESCAPE)], defaultdict(bool))
    assert state.value is TerminalState.TERMINAL
    assert not handler.closed


def test_pong_held_keys_move_paddles(setup):
    handler, _, state, pong, _ = setup
    state.value = TerminalState.PONG
    y1, y2 = pong.paddle1.y, pong.paddle2.y
    pressed = defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
    handler.pong_poll_events([], pressed)
    assert pong.paddle1.y == y1 - pong.paddle_speed
    assert pong.paddle2.y == y2 + pong.paddle_speed


def test_add_character_out_of_range_is_ignored(setup):
    handler = setup[0]
    handler.add_character("a", 0)
    handler.add_character("b", 5)
    handler.add_character("c", -1)
    assert handler.text == "a"