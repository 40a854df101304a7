import random

import pygame
import pytest
from pygame.math import Vector2

from pongrework.config import WINDOW_HEIGHT, WINDOW_WIDTH
from pongrework.shapes import SERVE_FORCE, WHITE, Circle, Rect


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


def test_rect_holds_geometry_and_default_color():
    rect = Rect((10, 20), (60, 10))
    assert rect.position == Vector2(10, 20)
    assert rect.scale == Vector2(60, 10)
    assert rect.color == WHITE
    assert rect.is_rect and not rect.is_circle


def test_rect_render_fills_its_area_only(surface):
    rect = Rect((100, 200), (60, 10), color=(10, 200, 30))
    rect.render(surface)
    assert pixel(surface, 101, 201) == (10, 200, 30)
    assert pixel(surface, 159, 209) == (10, 200, 30)
    assert pixel(surface, 99, 201) == (0, 0, 0)
    assert pixel(surface, 101, 211) == (0, 0, 0)


def test_rect_update_physics_moves_and_damps():
    rect = Rect((100, 100), (60, 10))
    rect.apply_force((-5.0, 0.0))
    rect.update_physics()
    assert rect.position.x < 100
    assert rect.position.y == 100
    assert abs(rect.acceleration.x) < 5.0


def test_rect_at_rest_stays_put():
    rect = Rect((50, 60), (60, 10))
    rect.update_physics()
    assert rect.position == Vector2(50, 60)


def test_circle_keeps_velocity_without_damping():
    circle = Circle((0, 0), 10)
    assert circle.k == 0.0
    circle.apply_force((1.0, 2.0))
    circle.update_physics()
    circle.update_physics()
    assert circle.acceleration == Vector2(1.0, 2.0)
    assert circle.position == Vector2(2.0, 4.0)


def test_circle_speed_is_capped():
    circle = Circle((0, 0), 10)
    circle.apply_force((30.0, 40.0))
    circle.update_physics()
    speed = abs(circle.acceleration.x) + abs(circle.acceleration.y)
    assert speed == pytest.approx(circle.max_velocity)


def test_circle_render_draws_disc(surface):
    circle = Circle((50, 50), 10)
    circle.render(surface)
    assert pixel(surface, 60, 60) == WHITE
    assert pixel(surface, 50, 50) == (0, 0, 0)
    assert pixel(surface, 80, 80) == (0, 0, 0)


def test_restart_centres_the_ball():
    circle = Circle((3, 7), 10)
    circle.restart(random.Random(1))
    assert circle.center == Vector2(WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0)


@pytest.mark.parametrize(
    "value, expected",
    [(0, Vector2(SERVE_FORCE, SERVE_FORCE)), (1, Vector2(-SERVE_FORCE, -SERVE_FORCE))],
)
def test_restart_serve_direction_follows_rng(value, expected):
    circle = Circle((0, 0), 10)
    circle.apply_force((2.0, -3.0))
    circle.restart(FixedRng(value))
    assert circle.acceleration == expected


def test_restart_discards_previous_velocity():
    circle = Circle((0, 0), 10)
    circle.apply_force((123.0, -456.0))
    circle.restart(random.Random(7))
    assert abs(circle.acceleration.x) == SERVE_FORCE
    assert abs(circle.acceleration.y) == SERVE_FORCE


def test_restart_serves_in_every_direction_over_many_seeds():
    seen = set()
    for seed in range(50):
        circle = Circle((0, 0), 10)
        circle.restart(random.Random(seed))
        seen.add((circle.acceleration.x > 0, circle.acceleration.y > 0))
    assert len(seen) == 4


def test_ball_collides_with_paddle_it_overlaps():
    paddle = Rect((150, 10), (60, 10))
    ball = Circle((170, 12), 10)
    assert paddle.detect_collision(ball)
    far_ball = Circle((170, 200), 10)
    assert not paddle.detect_collision(far_ball)