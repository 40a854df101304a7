"""On-screen overlay: start prompt, frame rate, scores and the volume panel."""

from __future__ import annotations

import math

import pygame

from .config import WINDOW_HEIGHT, WINDOW_WIDTH
from .sound import MAX_VOLUME

START_TEXT = "Press ENTER to start game"
TEXT_COLOR = (255, 255, 255)
TEXT_SIZE = 26
CONTROLLER_TEXT_SIZE = 16

CONTROLLER_RECT = (10, 60, 170, 55)
CONTROLLER_BG = (21, 22, 35)
CONTROLLER_BORDER = (110, 110, 128)
TRACK_COLOR = (41, 74, 122)
GRAB_COLOR = (66, 150, 250)
GRAB_WIDTH = 10

TOGGLE_CONTROLLER_KEY = pygame.K_F2
TOGGLE_FPS_KEY = pygame.K_F4

_FONTS: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _FONTS.clear()
    font = _FONTS.get(size)
    if font is None:
        font = _FONTS[size] = pygame.font.Font(None, size)
    return font


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def _clamp_volume(volume) -> int:
    return max(0, min(int(volume), MAX_VOLUME))


def _blit_text(surface: pygame.Surface, font: pygame.font.Font, text: str, pos) -> None:
    image = font.render(text, True, TEXT_COLOR)
    surface.blit(image, (round(pos[0]), round(pos[1])))


def fps_value(dt: float) -> int:
    """Return the frame rate shown for a frame that took ``dt`` seconds.

    The value is rounded to a multiple of ten. A zero ``dt`` (no frame
    measured yet) gives 0.
    """
    if dt < 0:
        raise ValueError(f"frame time cannot be negative, got {dt}")
    if dt == 0:
        return 0
    return _round_half_away(1.0 / (dt * 10.0)) * 10


class SoundControllerUI:
    """A small panel with two sliders for music and effect volume."""

    def __init__(self, sound=None) -> None:
        self.sound = sound
        self.show_controller = False
        self.music_volume = MAX_VOLUME
        self.sfx_volume = MAX_VOLUME
        self.rect = pygame.Rect(CONTROLLER_RECT)
        self.music_track = pygame.Rect(self.rect.x + 6, self.rect.y + 6, 110, 19)
        self.sfx_track = pygame.Rect(self.rect.x + 6, self.rect.y + 30, 110, 19)
        self._dragging: str | None = None

    def _tracks(self):
        return (("music", self.music_track), ("sfx", self.sfx_track))

    def set_volumes(self, music_volume, sfx_volume) -> bool:
        """Set both volumes, clamped to 0..100; return whether anything changed."""
        music = _clamp_volume(music_volume)
        sfx = _clamp_volume(sfx_volume)
        if (music, sfx) == (self.music_volume, self.sfx_volume):
            return False
        self.music_volume, self.sfx_volume = music, sfx
        if self.sound is not None:
            self.sound.update_volumes(music, sfx)
        return True

    @staticmethod
    def _value_at(track: pygame.Rect, x: float) -> int:
        span = max(track.width - 1, 1)
        ratio = max(0.0, min((x - track.left) / span, 1.0))
        return _round_half_away(ratio * MAX_VOLUME)

    def _drag_to(self, x: float) -> bool:
        if self._dragging == "music":
            return self.set_volumes(self._value_at(self.music_track, x), self.sfx_volume)
        return self.set_volumes(self.music_volume, self._value_at(self.sfx_track, x))

    def handle_event(self, event) -> bool:
        """Let the mouse move the sliders; return whether a volume changed."""
        if not self.show_controller:
            self._dragging = None
            return False
        etype = event.type
        if etype == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 0) == 1:
            for name, track in self._tracks():
                if track.collidepoint(event.pos):
                    self._dragging = name
                    return self._drag_to(event.pos[0])
            return False
        if etype == pygame.MOUSEMOTION and self._dragging is not None:
            return self._drag_to(event.pos[0])
        if etype == pygame.MOUSEBUTTONUP and getattr(event, "button", 0) == 1:
            self._dragging = None
        return False

    def render(self, surface: pygame.Surface) -> None:
        """Draw the panel when it is shown."""
        if not self.show_controller:
            return
        pygame.draw.rect(surface, CONTROLLER_BG, self.rect)
        pygame.draw.rect(surface, CONTROLLER_BORDER, self.rect, 1)
        font = _font(CONTROLLER_TEXT_SIZE)
        sliders = (
            ("Music", self.music_track, self.music_volume),
            ("SFX", self.sfx_track, self.sfx_volume),
        )
        for label, track, value in sliders:
            pygame.draw.rect(surface, TRACK_COLOR, track)
            grab_x = track.left + round((track.width - GRAB_WIDTH) * value / MAX_VOLUME)
            pygame.draw.rect(
                surface, GRAB_COLOR, (grab_x, track.top + 2, GRAB_WIDTH, track.height - 4)
            )
            value_image = font.render(str(value), True, TEXT_COLOR)
            surface.blit(value_image, value_image.get_rect(center=track.center))
            label_image = font.render(label, True, TEXT_COLOR)
            surface.blit(
                label_image,
                (track.right + 6, track.centery - label_image.get_height() // 2),
            )


class UI:
    """The game overlay and the state of its toggles."""

    def __init__(self, sound=None) -> None:
        self.has_started = False
        self.show_fps = True
        self.sound_controller = SoundControllerUI(sound)

    def process_event(self, event) -> None:
        """F2 toggles the volume panel, F4 the frame-rate counter."""
        if event.type == pygame.KEYDOWN:
            key = getattr(event, "key", None)
            if key == TOGGLE_CONTROLLER_KEY:
                self.sound_controller.show_controller = not self.sound_controller.show_controller
            elif key == TOGGLE_FPS_KEY:
                self.show_fps = not self.show_fps
        self.sound_controller.handle_event(event)

    def render(self, surface: pygame.Surface, dt: float, up_points: int, down_points: int) -> None:
        """Draw the prompt, frame rate, both scores and the volume panel."""
        font = _font(TEXT_SIZE)

        if not self.has_started:
            width, height = font.size(START_TEXT)
            _blit_text(
                surface,
                font,
                START_TEXT,
                (WINDOW_WIDTH / 2.0 - width / 2.0, WINDOW_HEIGHT / 2.0 - height + 20.0),
            )

        if self.show_fps:
            _blit_text(surface, font, str(fps_value(dt)), (0.0, 0.0))

        up_text = str(up_points)
        width, _ = font.size(up_text)
        _blit_text(surface, font, up_text, (WINDOW_WIDTH / 2.0 - width * 1.2, 25.0))

        down_text = str(down_points)
        width, height = font.size(down_text)
        _blit_text(
            surface,
            font,
            down_text,
            (WINDOW_WIDTH / 2.0 - width * 1.2, WINDOW_HEIGHT - 35.0 - height),
        )

        self.sound_controller.render(surface)