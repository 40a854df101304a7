"""Match state and the main loop tying physics, drawing, sound and input together."""

from __future__ import annotations

import argparse
import logging
import random

import pygame
from pygame.math import Vector2

from .config import FRAME_TIME_MS, WINDOW_HEIGHT, WINDOW_SIZE, WINDOW_TITLE, WINDOW_WIDTH
from .shapes import Circle, Rect
from .sound import Sound
from .ui import UI

logger = logging.getLogger(__name__)

PADDLE_SIZE = (60.0, 10.0)
PADDLE_FORCE = 5.0
PADDLE_MARGIN = 20.0
BALL_RADIUS = 10.0
WALL_BOUNCE = -2.0
BACKGROUND_COLOR = (0, 0, 0)


class Game:
    """Two paddles, one ball, the scores and everything drawn around them.

    ``sound`` defaults to loading the bundled sound files, ``rng`` decides the
    serve direction and ``clock`` returns milliseconds for frame timing.
    """

    def __init__(self, sound: Sound | None = None, *, rng=None, clock=None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock or pygame.time.get_ticks

        self.bar = Rect((WINDOW_WIDTH / 2.0 - 30.0, 10.0), PADDLE_SIZE)
        self.bar2 = Rect((WINDOW_WIDTH / 2.0 - 30.0, WINDOW_HEIGHT - 20.0), PADDLE_SIZE)
        self.circle = Circle((0.0, 0.0), BALL_RADIUS)
        self.circle.restart(self.rng)

        self.last_time = self.clock()
        self.delta_time = 0.0

        self.sound = sound if sound is not None else Sound()
        self.ui = UI(self.sound)

        self.up_points = 0
        self.down_points = 0
        self._closed = False

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _steer(paddle: Rect, pressed, left_key: int, right_key: int) -> None:
        if pressed[left_key] and paddle.position.x > PADDLE_MARGIN:
            paddle.apply_force(Vector2(-PADDLE_FORCE, 0.0))
        elif (
            pressed[right_key]
            and paddle.position.x + paddle.scale.x < WINDOW_WIDTH - PADDLE_MARGIN
        ):
            paddle.apply_force(Vector2(PADDLE_FORCE, 0.0))

    def handle_event(self, event, pressed) -> bool:
        """React to one event given the keys held down; return False to quit."""
        if event.type == pygame.QUIT:
            return False
        if pressed[pygame.K_RETURN] and not self.ui.has_started:
            self.ui.has_started = True

        self.ui.process_event(event)

        if not self.ui.has_started:
            return True

        self._steer(self.bar, pressed, pygame.K_a, pygame.K_d)
        self._steer(self.bar2, pressed, pygame.K_LEFT, pygame.K_RIGHT)
        return True

    def _bounce_sound(self) -> None:
        self.sound.play_collision_ball(self.circle.position)

    def _score(self) -> None:
        self.circle.restart(self.rng)
        self.ui.has_started = False
        self.sound.play_win()

    def update_physics(self) -> None:
        """Advance paddles and ball one step, handling bounces and scoring."""
        if not self.ui.has_started:
            return

        self.bar.update_physics()
        self.bar2.update_physics()

        circle = self.circle
        if self.bar.detect_collision(circle):
            circle.solve_circle_collision(self.bar)
            self._bounce_sound()
        elif self.bar2.detect_collision(circle):
            circle.solve_circle_collision(self.bar2)
            self._bounce_sound()

        if circle.position.x <= 0.0:
            circle.apply_force(Vector2(circle.acceleration.x * WALL_BOUNCE, 0.0))
            self._bounce_sound()
        if circle.position.x + circle.radius * 2.0 >= WINDOW_WIDTH:
            circle.apply_force(Vector2(circle.acceleration.x * WALL_BOUNCE, 0.0))
            self._bounce_sound()

        circle.update_physics()

        if circle.position.y + circle.radius <= 0.0:
            self.down_points += 1
            self._score()
        elif circle.position.y >= WINDOW_HEIGHT:
            self.up_points += 1
            self._score()

    def update_render(self, surface: pygame.Surface) -> None:
        """Draw the frame onto ``surface`` and measure how long the last one took."""
        surface.fill(BACKGROUND_COLOR)
        for body in (self.bar, self.bar2, self.circle):
            body.render(surface)
        self.ui.render(surface, self.delta_time, self.up_points, self.down_points)

        now = self.clock()
        self.delta_time = (now - self.last_time) / 1000.0
        self.last_time = now

        self.sound.play_music()

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            self.last_time = self.clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event, pygame.key.get_pressed()):
                        running = False
                        break
                if not running:
                    break
                self.update_physics()
                self.update_render(surface)
                pygame.display.flip()
                if self.delta_time < FRAME_TIME_MS:
                    pygame.time.delay(int(FRAME_TIME_MS - self.delta_time))
        finally:
            self.close()
            pygame.quit()

    def close(self) -> None:
        """Release the sound system; safe to call more than once."""
        if self._closed:
            return
        self.sound.close()
        self._closed = True
        logger.info("Game closed cleanly")


def main(argv=None) -> int:
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="pongrework",
        description="Two-player pong. A/D move the top paddle, LEFT/RIGHT the bottom one; "
        "F2 shows the volume panel, F4 the frame rate.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    pygame.init()
    try:
        game = Game()
    except (pygame.error, FileNotFoundError) as exc:
        logger.error("Error to start game: %s", exc)
        pygame.quit()
        return 1
    game.run()
    return 0