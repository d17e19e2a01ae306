"""
Error taxonomy for the game engine.

Self-collision and input timeouts are normal game endings and are not
represented here.
"""


class SnakeGameError(Exception):
    """Base class for game engine errors."""


class InvalidDimension(SnakeGameError, ValueError):
    """Raised when a board is built with a non-positive width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height


class AlreadyRunning(SnakeGameError):
    """Raised when a game is started on a session that is still active."""
