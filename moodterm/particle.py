"""A single short-lived, moving dot."""

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Particle:
    """A circle that moves at constant velocity until its lifetime runs out.

    ``position`` is the top-left corner of the circle's bounding box.
    """

    position: tuple[float, float]
    radius: float
    color: tuple[int, int, int]
    lifetime: float
    velocity: tuple[float, float]
    dead: bool = False

    def update(self, dt: float) -> None:
        """Age the particle by ``dt`` and move it if it is still alive."""
        self.lifetime -= dt
        if self.lifetime <= 0:
            self.dead = True
        else:
            x, y = self.position
            vx, vy = self.velocity
            self.position = (x + vx * dt, y + vy * dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the particle onto ``surface``."""
        x, y = self.position
        center = (x + self.radius, y + self.radius)
        pygame.draw.circle(surface, self.color, center, self.radius)