"""Window geometry and frame timing shared across the game."""

WINDOW_SIZE: tuple[int, int] = (360, 480)
WINDOW_WIDTH, WINDOW_HEIGHT = WINDOW_SIZE

WINDOW_TITLE = "PongGL - Rework"

TARGET_FPS = 60
# Milliseconds a single frame is allowed to take.
FRAME_TIME_MS = 1000.0 / TARGET_FPS

ASSETS_DIR = "assets"
BACKGROUND_SOUND = "assets/sounds/background.mp3"
COLLISION_SOUND = "assets/sounds/ball.mp3"
WIN_SOUND = "assets/sounds/win.mp3"