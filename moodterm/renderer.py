"""Drawing of the terminal screen and of the pong game."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pygame

from moodterm.commands import PROMPT
from moodterm.history import WELCOME, History
from moodterm.mood import MoodManager
from moodterm.pong import Pong

log = logging.getLogger(__name__)

FONT_PATH = Path("Assets/Fonts/consolas.ttf")

TEXT_SIZE = 20
SCORE_SIZE = 40
LINE_HEIGHT = 20
TOP_DISTANCE = 8
LEFT_MARGIN = 10
VISIBLE_LINES = 20
CURSOR_START_X = 5
CURSOR_BLINK_TIME = 0.5
CURSOR_BLINK_STEP = 0.015
CURSOR_HIDDEN_UNTIL = -0.5
SCORE1_POS = (300, 50)
SCORE2_POS = (900, 50)


def scroll_offset(history_size: int) -> int:
    """Vertical scroll in pixels that keeps the newest lines and the prompt visible."""
    if history_size > VISIBLE_LINES:
        return (history_size - VISIBLE_LINES) * LINE_HEIGHT - TOP_DISTANCE
    return 0


class TerminalRenderer:
    """Draws history, prompt, input and a blinking cursor onto ``surface``.

    With ``surface`` set to ``None`` the layout and cursor state are still
    computed, but nothing is drawn. Presenting the frame is left to the caller.
    """

    def __init__(
        self,
        history: History,
        moods: MoodManager,
        pong: Pong,
        surface: pygame.Surface | None = None,
        font_path: Path | str = FONT_PATH,
    ) -> None:
        self.history = history
        self.moods = moods
        self.pong = pong
        self.surface = surface
        self.font_path = Path(font_path)
        self.text_color = moods.text_color
        self.cursor_blink = CURSOR_BLINK_TIME
        self.cursor_visible = True
        self.cursor_x = CURSOR_START_X
        self.scroll_offset = 0
        self._fonts: dict[int, pygame.font.Font] = {}

        self.history.add(WELCOME)
        self.history.add("\n")

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(str(self.font_path), size)
            except (OSError, pygame.error):
                log.error("Failed to load font %s", self.font_path)
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _advance(self, text: str) -> int:
        if not text:
            return 0
        return sum(metric[4] for metric in self._font(TEXT_SIZE).metrics(text) if metric)

    def _cursor_position(self, text: str, cursor_pos: int) -> int:
        return CURSOR_START_X + self._advance(PROMPT) + self._advance(text[:max(cursor_pos, 0)])

    def _blit(self, size: int, text: str, pos: tuple[float, float]) -> None:
        if self.surface is None or not text:
            return
        self.surface.blit(self._font(size).render(text, True, self.text_color), pos)

    def draw(self, history: Sequence[str], text: str, cursor_pos: int) -> None:
        """Draw the history lines, the prompt with the typed text and the cursor."""
        self.scroll_offset = scroll_offset(len(self.history.lines))
        top = TOP_DISTANCE - self.scroll_offset

        if self.surface is not None:
            self.surface.fill(self.moods.background_color)
        for row, line in enumerate(history):
            self._blit(TEXT_SIZE, line.replace("\n", ""), (LEFT_MARGIN, row * LINE_HEIGHT + top))

        prompt_y = len(history) * LINE_HEIGHT + top
        self.cursor_x = self._cursor_position(text, cursor_pos)

        self.cursor_blink -= CURSOR_BLINK_STEP
        self.cursor_visible = self.cursor_blink >= 0.0
        if not self.cursor_visible and self.cursor_blink <= CURSOR_HIDDEN_UNTIL:
            self.cursor_blink = CURSOR_BLINK_TIME

        if self.cursor_visible:
            self._blit(TEXT_SIZE, "|", (self.cursor_x, prompt_y))
        self._blit(TEXT_SIZE, PROMPT, (LEFT_MARGIN, prompt_y))
        prompt_width = self._font(TEXT_SIZE).size(PROMPT)[0]
        self._blit(TEXT_SIZE, text, (LEFT_MARGIN + prompt_width + 1, prompt_y))

    def reset_cursor_blink(self) -> None:
        """Show the cursor again from the start of its blink cycle."""
        self.cursor_blink = CURSOR_BLINK_TIME

    def update(self) -> None:
        """Pick up the current mood's text colour."""
        self.text_color = self.moods.text_color

    def draw_pong(self) -> None:
        """Draw the pong field in the current mood's colours."""
        if self.surface is None:
            return
        color = self.moods.text_color
        self.text_color = color
        self.surface.fill(self.moods.background_color)

        pong = self.pong
        self._blit(SCORE_SIZE, str(pong.score1), SCORE1_POS)
        self._blit(SCORE_SIZE, str(pong.score2), SCORE2_POS)
        for paddle in (pong.paddle1, pong.paddle2):
            rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
            pygame.draw.rect(self.surface, color, rect)
        radius = pong.ball_radius
        center = (pong.ball.x + radius, pong.ball.y + radius)
        pygame.draw.circle(self.surface, color, center, radius)