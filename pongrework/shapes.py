"""Paddles and the ball: rigid bodies that know how to draw themselves."""

from __future__ import annotations

import random

import pygame
from pygame.math import Vector2

from .config import WINDOW_HEIGHT, WINDOW_WIDTH
from .rigidbody import Rigidbody

WHITE = (255, 255, 255)
SERVE_FORCE = 5.0


class Rect(Rigidbody):
    """An axis-aligned box body, used for the paddles."""

    def __init__(self, position, scale, color=WHITE) -> None:
        super().__init__(position=position, scale=scale)
        self.color = tuple(color)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the box onto ``surface``."""
        area = pygame.Rect(
            round(self.position.x),
            round(self.position.y),
            round(self.scale.x),
            round(self.scale.y),
        )
        pygame.draw.rect(surface, self.color, area)

    def update_physics(self) -> None:
        """Advance the box by one physics step."""
        self.update_position()


class Circle(Rigidbody):
    """A circular body with no damping, used for the ball."""

    def __init__(self, position, radius, color=WHITE) -> None:
        super().__init__(position=position, radius=radius, k=0.0)
        self.color = tuple(color)

    @property
    def center(self) -> Vector2:
        return self.position + Vector2(self.radius, self.radius)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the ball onto ``surface``."""
        center = self.center
        pygame.draw.circle(surface, self.color, (center.x, center.y), self.radius)

    def update_physics(self) -> None:
        """Advance the ball by one physics step."""
        self.update_position()

    def restart(self, rng=None) -> None:
        """Put the ball back in the middle of the field and serve it diagonally.

        ``rng`` must provide ``randrange``; the ``random`` module is used when
        it is omitted.
        """
        if rng is None:
            rng = random
        self.position = Vector2(
            WINDOW_WIDTH / 2.0 - self.radius, WINDOW_HEIGHT / 2.0 - self.radius
        )
        self.apply_force(-self.acceleration)

        force_x = -SERVE_FORCE if rng.randrange(2) else SERVE_FORCE
        force_y = -SERVE_FORCE if rng.randrange(2) else SERVE_FORCE
        self.apply_force(Vector2(force_x, force_y))