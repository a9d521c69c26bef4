from __future__ import annotations

import random

import pytest

from flappy.config import GameConfig
from flappy.errors import ConfigurationError
from flappy.obstacles import ObstacleGenerator

from conftest import FixedRng


def test_spawn_uses_injected_rng(config: GameConfig) -> None:
    generator = ObstacleGenerator(config, random.Random(42))
    expected = random.Random(42)

    gates = [generator.spawn(500).gate for _ in range(20)]

    assert gates == [expected.randint(60, 400) for _ in range(20)]


def test_spawn_fills_fixed_dimensions(config: GameConfig) -> None:
    obstacle = ObstacleGenerator(config, FixedRng(123)).spawn(640)

    assert obstacle.x == 640.0
    assert obstacle.gate == 123
    assert obstacle.gap == 140
    assert obstacle.width == 52
    assert obstacle.speed == 2.5


def test_gate_range_is_closed(config: GameConfig) -> None:
    rng = FixedRng()
    ObstacleGenerator(config, rng).spawn(0)
    assert rng.calls == [(60, 600 - 60 - 140)]

    generator = ObstacleGenerator(config, random.Random(7))
    gates = {generator.spawn(0).gate for _ in range(5000)}
    assert min(gates) == 60
    assert max(gates) == 400


def test_initial_obstacles_are_evenly_spaced(config: GameConfig, rng: random.Random) -> None:
    obstacles = ObstacleGenerator(config, rng).initial_obstacles()
    assert [o.x for o in obstacles] == [600.0, 800.0, 1000.0]


@pytest.mark.parametrize("height", [0, 200, 259])
def test_degenerate_playfield_is_rejected(height: int) -> None:
    with pytest.raises(ConfigurationError):
        ObstacleGenerator(GameConfig(playfield_height=height))


def test_smallest_valid_playfield_has_a_single_gate() -> None:
    generator = ObstacleGenerator(GameConfig(playfield_height=260), random.Random(0))
    assert {generator.spawn(0).gate for _ in range(50)} == {60}


def test_recycle_places_behind_rightmost(config: GameConfig) -> None:
    generator = ObstacleGenerator(config, FixedRng(300))
    obstacles = [generator.spawn(x) for x in (-53.0, 147.0, 347.0)]
    obstacles[0].gate = 77

    generator.recycle(obstacles[0], obstacles)

    assert obstacles[0].x == 547.0
    assert obstacles[0].gate == 300
    assert [o.x for o in obstacles[1:]] == [147.0, 347.0]
