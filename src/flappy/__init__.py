"""
Flappy Gates: a side-scrolling gate-runner game loop.
"""

from .config import GameConfig
from .data_models import GameSnapshot, GameState
from .errors import CollaboratorFailure, ConfigurationError, FlappyError
from .game import Game

__all__ = [
    "CollaboratorFailure",
    "ConfigurationError",
    "FlappyError",
    "Game",
    "GameConfig",
    "GameSnapshot",
    "GameState",
]
