"""
obstacles.py: Procedural obstacle generation and recycling.
"""

import logging
import random
from typing import List, Optional

from .config import GameConfig
from .data_models import Obstacle
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ObstacleGenerator:
    """
    Spawns obstacles with a random gate and recycles those that scrolled off.

    The random source only needs ``randint(a, b)`` (inclusive on both ends),
    so tests can pass a seeded ``random.Random`` or a scripted stand-in.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        if config.max_gate < config.min_gate:
            raise ConfigurationError(
                f"Playfield height {config.playfield_height} leaves no room for a gate: "
                f"max gate {config.max_gate} < min gate {config.min_gate}")
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def _roll_gate(self) -> int:
        return self.rng.randint(self.config.min_gate, self.config.max_gate)

    def spawn(self, spawn_x: float) -> Obstacle:
        """Creates a new obstacle at spawn_x."""
        return Obstacle(
            x=float(spawn_x),
            gate=self._roll_gate(),
            gap=self.config.gap_height,
            width=self.config.obstacle_width,
            speed=self.config.obstacle_speed,
        )

    def initial_obstacles(self) -> List[Obstacle]:
        """The evenly spaced obstacles a run starts with, all right of the playfield."""
        first_x = self.config.playfield_width + self.config.obstacle_spacing
        return [
            self.spawn(first_x + i * self.config.obstacle_spacing)
            for i in range(self.config.obstacle_count)
        ]

    def recycle(self, obstacle: Obstacle, obstacles: List[Obstacle]):
        """
        Moves obstacle behind the rightmost one and re-rolls its gate.
        Reads sibling positions as they are right now, including obstacle itself.
        """
        obstacle.x = max(o.x for o in obstacles) + self.config.obstacle_spacing
        obstacle.gate = self._roll_gate()
        logger.debug("Recycled obstacle to x=%.1f gate=%d", obstacle.x, obstacle.gate)
