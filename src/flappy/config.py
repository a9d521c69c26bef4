"""
config.py: Immutable game configuration built from the module constants.
"""

from dataclasses import dataclass

from .constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT, FLOOR_HEIGHT,
    ACTOR_X, ACTOR_WIDTH, ACTOR_HEIGHT,
    GRAVITY, JUMP_IMPULSE,
    OBSTACLE_COUNT, OBSTACLE_WIDTH, OBSTACLE_SPEED, OBSTACLE_SPACING,
    GAP_HEIGHT, MIN_GATE,
)


@dataclass(frozen=True)
class GameConfig:
    """Fixed parameters of a run. Defaults match the shipped game."""
    playfield_width: int = PLAYFIELD_WIDTH
    playfield_height: int = PLAYFIELD_HEIGHT
    floor_height: int = FLOOR_HEIGHT

    actor_x: float = ACTOR_X
    actor_width: int = ACTOR_WIDTH
    actor_height: int = ACTOR_HEIGHT

    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE

    obstacle_count: int = OBSTACLE_COUNT
    obstacle_width: int = OBSTACLE_WIDTH
    obstacle_speed: float = OBSTACLE_SPEED
    obstacle_spacing: int = OBSTACLE_SPACING
    gap_height: int = GAP_HEIGHT
    min_gate: int = MIN_GATE

    @property
    def floor_y(self) -> int:
        """Y coordinate of the top of the floor strip."""
        return self.playfield_height - self.floor_height

    @property
    def max_gate(self) -> int:
        return self.playfield_height - self.floor_height - self.gap_height
