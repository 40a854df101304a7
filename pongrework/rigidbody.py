"""Minimal 2D rigid-body physics for paddles (rectangles) and the ball (circle)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pygame.math import Vector2

DAMPING = 0.3
EPSILON = 0.01
MAX_VELOCITY = 5.0
COLLISION_PUSH = 5.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class Rigidbody:
    """A body that is either a circle (``radius``) or an axis-aligned box (``scale``).

    ``position`` is the top-left corner for both shapes; a circle occupies the
    square of side ``2 * radius`` starting there.
    """

    position: Vector2
    scale: Vector2 | None = None
    radius: float | None = None
    k: float = DAMPING
    ep: float = EPSILON
    max_velocity: float = MAX_VELOCITY
    acceleration: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.acceleration = Vector2(self.acceleration)
        if self.scale is not None:
            self.scale = Vector2(self.scale)
        if self.radius is not None:
            self.radius = float(self.radius)

    @property
    def is_circle(self) -> bool:
        return self.radius is not None

    @property
    def is_rect(self) -> bool:
        return self.scale is not None

    def _smooth_round(self, value: float) -> float:
        if value == 0:
            return 0.0
        return value * (1.0 + self.ep)

    def update_position(self) -> None:
        """Damp the velocity, cap its speed and move the body by it."""
        ax = self.acceleration.x - self._smooth_round(self.acceleration.x * self.k)
        ay = self.acceleration.y - self._smooth_round(self.acceleration.y * self.k)

        total = abs(ax) + abs(ay)
        if total != 0:
            capped = _clamp(total, 0.0, self.max_velocity)
            ax = ax / total * capped
            ay = ay / total * capped

        self.acceleration = Vector2(ax, ay)
        self.position += self.acceleration

    def apply_force(self, force) -> None:
        """Add ``force`` to the current velocity."""
        self.acceleration += Vector2(force)

    def detect_collision(self, other: Rigidbody) -> bool:
        """Return whether a circle and a box overlap; any other pairing is False."""
        if self.is_circle and other.is_rect:
            return detect_circle_rect_collision(self, other)
        if self.is_rect and other.is_circle:
            return detect_circle_rect_collision(other, self)
        return False

    def solve_circle_collision(self, other: Rigidbody) -> None:
        """Push this circle relative to the centre of the box ``other``.

        Does nothing when this body is not a circle. Raises ZeroDivisionError
        when the two centres coincide.
        """
        if not self.is_circle:
            return
        if not other.is_rect:
            raise ValueError("collision can only be solved against a box")
        box_center = other.position + other.scale / 2.0
        circle_center = self.position + Vector2(self.radius, self.radius)
        dx = box_center.x - circle_center.x
        dy = box_center.y - circle_center.y
        length = math.hypot(dx, dy)
        if length == 0:
            raise ZeroDivisionError("circle and box centres coincide")
        penetration = self.radius - length
        factor = penetration * COLLISION_PUSH / length
        self.apply_force(Vector2(dx * factor, dy * factor))


def detect_circle_rect_collision(circle: Rigidbody, rect: Rigidbody) -> bool:
    """Return whether ``circle`` overlaps the axis-aligned box ``rect``."""
    if not circle.is_circle:
        raise ValueError("first body must be a circle")
    if not rect.is_rect:
        raise ValueError("second body must be a box")

    radius = circle.radius
    center = circle.position + Vector2(radius, radius)
    half_x = rect.scale.x / 2.0
    half_y = rect.scale.y / 2.0
    box_x = rect.position.x + half_x
    box_y = rect.position.y + half_y

    closest_x = box_x + _clamp(center.x - box_x, -half_x, half_x)
    closest_y = box_y + _clamp(center.y - box_y, -half_y, half_y)
    return math.hypot(closest_x - center.x, closest_y - center.y) < radius