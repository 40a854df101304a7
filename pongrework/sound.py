"""Background music and sound effects for the game."""

from __future__ import annotations

import math
from typing import Any, Callable

import pygame
from pygame.math import Vector2

from .config import (
    BACKGROUND_SOUND,
    COLLISION_SOUND,
    WIN_SOUND,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

MAX_VOLUME = 100


def _load_pygame_sound(path: str) -> Any:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def collision_direction(ball_position) -> Vector2:
    """Return the unit vector from the middle of the field to ``ball_position``.

    A ball exactly in the middle has no direction and gives the zero vector.
    """
    offset = Vector2(ball_position) - Vector2(WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0)
    distance = math.hypot(offset.x, offset.y)
    if distance == 0:
        return Vector2(0.0, 0.0)
    return offset / distance


def _stereo_gains(direction: Vector2) -> tuple[float, float]:
    left = max(0.0, min(1.0, 1.0 - direction.x))
    right = max(0.0, min(1.0, 1.0 + direction.x))
    return left, right


def _check_volume(volume: int) -> int:
    if not 0 <= volume <= MAX_VOLUME:
        raise ValueError(f"volume must be between 0 and {MAX_VOLUME}, got {volume}")
    return volume


class Sound:
    """Owns the music track and the effects played during a match.

    ``loader`` turns a file path into a playable sound; by default the files
    are loaded through the pygame mixer.
    """

    def __init__(
        self,
        background_file: str = BACKGROUND_SOUND,
        collision_file: str = COLLISION_SOUND,
        win_file: str = WIN_SOUND,
        *,
        loader: Callable[[str], Any] | None = None,
    ) -> None:
        load = loader or _load_pygame_sound
        self.background = load(background_file)
        self.ball_collision = load(collision_file)
        self.win = load(win_file)
        self.music_volume = MAX_VOLUME
        self.sfx_volume = MAX_VOLUME
        self.closed = False

    def __enter__(self) -> Sound:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError("sound system is closed")

    def play_music(self) -> None:
        """Start the background track unless it is already playing."""
        self._ensure_open()
        if self.background.get_num_channels() == 0:
            self.background.play()

    def play_collision_ball(self, ball_position) -> None:
        """Play the bounce effect, panned towards where the ball is."""
        self._ensure_open()
        direction = collision_direction(ball_position)
        channel = self.ball_collision.play()
        if channel is not None:
            channel.set_volume(*_stereo_gains(direction))

    def play_win(self) -> None:
        """Play the point-scored effect."""
        self._ensure_open()
        self.win.play()

    def update_volumes(self, music_volume: int, sfx_volume: int) -> None:
        """Set music and effect volumes, each from 0 to 100."""
        self.music_volume = _check_volume(music_volume)
        self.sfx_volume = _check_volume(sfx_volume)
        self.background.set_volume(self.music_volume / MAX_VOLUME)
        self.ball_collision.set_volume(self.sfx_volume / MAX_VOLUME)
        self.win.set_volume(self.sfx_volume / MAX_VOLUME)

    def close(self) -> None:
        """Stop every sound; the object cannot play anything afterwards."""
        if self.closed:
            return
        for sound in (self.background, self.ball_collision, self.win):
            sound.stop()
        self.closed = True