from __future__ import annotations

import random

import pytest

from flappy.config import GameConfig
from flappy.obstacles import ObstacleGenerator
from flappy.simulation import SimulationContext


class FixedRng:
    """Stand-in random source that always rolls the same gate."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return a if self.value is None else self.value


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def context(config: GameConfig, rng: random.Random) -> SimulationContext:
    return SimulationContext.fresh(config, ObstacleGenerator(config, rng))
