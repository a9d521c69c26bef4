"""
errors.py: Exception types raised by the game core and its collaborators.
"""


class FlappyError(Exception):
    """Base class for every error raised by the flappy package."""


class ConfigurationError(FlappyError, ValueError):
    """The playfield dimensions leave no room for a valid gate offset."""


class CollaboratorFailure(FlappyError):
    """The game-over notification was rejected, failed or timed out."""
