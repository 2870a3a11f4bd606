"""Rockets that rise from the bottom of the screen and burst into sparks."""

from __future__ import annotations

import math
import random

import pygame

from moodterm.particle import Particle

STEP = 0.1
TIMER_STEP = 0.08
ROCKET_RADIUS = 5
SPARK_RADIUS = 3


class _Launcher:
    """One of the independent rocket timers."""

    def __init__(self, rng: random.Random) -> None:
        self.elapsed = 0.0
        self.interval = rng.randint(1, 5)


class Fireworks:
    """Particle-based fireworks on a field of the given size."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.color: tuple[int, int, int] = (255, 255, 255)
        self.rockets: list[list[Particle]] = []
        self.explosions: list[Particle] = []
        self._launchers = [_Launcher(self.rng) for _ in range(3)]

    def update(self, color: tuple[int, int, int], surface: pygame.Surface | None) -> None:
        """Advance one frame, drawing onto ``surface`` when one is given."""
        self.color = color

        for launcher in self._launchers:
            if launcher.elapsed >= launcher.interval:
                self._spawn_rocket()
                launcher.elapsed = 0.0
                launcher.interval = self.rng.randint(1, 5)

        survivors = []
        for rocket in self.rockets:
            last_known = rocket[0].position if rocket else (0.0, 0.0)
            self._advance(rocket, surface)
            rocket[:] = [p for p in rocket if not p.dead]
            if rocket:
                survivors.append(rocket)
            else:
                self._spawn_explosion(last_known)
        self.rockets = survivors

        self._advance(self.explosions, surface)
        self.explosions = [p for p in self.explosions if not p.dead]

        for launcher in self._launchers:
            launcher.elapsed += TIMER_STEP

    @staticmethod
    def _advance(particles: list[Particle], surface: pygame.Surface | None) -> None:
        for particle in particles:
            particle.update(STEP)
            if surface is not None:
                particle.draw(surface)

    def _spawn_rocket(self) -> None:
        rng = self.rng
        count = rng.randint(10, 25)
        x = float(rng.randrange(self.width))
        y = float(self.height)
        lifetime = float(rng.randint(3, 6))
        velocity = (0.0, -float(rng.randint(50, 99)))
        self.rockets.append([
            Particle((x, y + i * 7), ROCKET_RADIUS, self.color, lifetime, velocity)
            for i in range(count)
        ])

    def _spawn_explosion(self, position: tuple[float, float]) -> None:
        rng = self.rng
        count = rng.randint(40, 80)
        lifetime = float(rng.randint(3, 5))
        for _ in range(count):
            angle = float(rng.randrange(360))
            speed = float(rng.randint(50, 149))
            divide = rng.randint(20, 35) / 10.0
            radian = angle * (3.14159 / 180.0)
            velocity = (
                math.cos(radian) * speed / divide,
                math.sin(radian) * speed / divide,
            )
            self.explosions.append(
                Particle(position, SPARK_RADIUS, self.color, lifetime, velocity)
            )