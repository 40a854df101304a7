"""Two-player vertical Pong with simple rigid-body physics, sound and an on-screen overlay."""

__version__ = "1.0.0"
__all__ = ["config", "rigidbody", "shapes", "sound", "ui", "game"]