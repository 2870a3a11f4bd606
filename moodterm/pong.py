"""A two-player pong game on a fixed 1200x600 field."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_WIDTH = 1200
FIELD_HEIGHT = 600
BALL_START = (600.0, 300.0)
BALL_RADIUS = 10
START_SPEED = 3.0
SPEED_STEP = 0.045


@dataclass
class _Box:
    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: "_Box") -> bool:
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        return left < right and top < bottom


class Pong:
    """Paddles, ball and scores; the ball speeds up on every bounce."""

    def __init__(self) -> None:
        self.paddle1 = _Box(50, 250, 10, 100)
        self.paddle2 = _Box(1140, 250, 10, 100)
        self.ball = _Box(*BALL_START, 2 * BALL_RADIUS, 2 * BALL_RADIUS)
        self.ball_radius = BALL_RADIUS
        self.ball_vx = -5.0
        self.ball_vy = -5.0
        self.ball_speed = START_SPEED
        self.paddle_speed = 5
        self.score1 = 0
        self.score2 = 0

    def _reset_ball(self) -> None:
        self.ball.x, self.ball.y = BALL_START
        self.ball_vx = -self.ball_vx
        self.ball_speed = START_SPEED

    def update(self) -> None:
        """Advance the ball one frame and resolve scoring and bounces."""
        scale = self.ball_speed / 2.5
        self.ball.x += self.ball_vx * scale
        self.ball.y += self.ball_vy * scale

        if self.ball.x < 0:
            self.score2 += 1
            self._reset_ball()
        if self.ball.x > FIELD_WIDTH:
            self.score1 += 1
            self._reset_ball()

        if self.ball.y < 0 or self.ball.y > FIELD_HEIGHT - 2 * BALL_RADIUS:
            self.ball_vy = -self.ball_vy
            self.ball_speed += SPEED_STEP

        for paddle in (self.paddle1, self.paddle2):
            if self.ball.intersects(paddle):
                self.ball_vx = -self.ball_vx
                self.ball_speed += SPEED_STEP

    def move_paddle1(self, dy: int) -> None:
        """Move the left paddle by ``dy`` steps (negative is up)."""
        self.paddle1.y += dy * self.paddle_speed

    def move_paddle2(self, dy: int) -> None:
        """Move the right paddle by ``dy`` steps (negative is up)."""
        self.paddle2.y += dy * self.paddle_speed