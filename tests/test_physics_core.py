from __future__ import annotations

import math

import pytest

from flappy.data_models import Actor, Obstacle, Rect
from flappy.physics_core import PhysicsCore, rects_overlap


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), True),
        (Rect(0, 0, 10, 10), Rect(2, 2, 3, 3), True),
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10), True),  # shared vertical edge
        (Rect(0, 0, 10, 10), Rect(0, 10, 10, 10), True),  # shared horizontal edge
        (Rect(0, 0, 10, 10), Rect(10, 10, 5, 5), True),  # shared corner
        (Rect(0, 0, 10, 10), Rect(10.5, 0, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(0, 10.5, 10, 10), False),
        (Rect(0, 0, 10, 10), Rect(-20, -20, 5, 5), False),
        (Rect(80, 300, 34, 24), Rect(80, 0, 52, 400), True),
    ],
)
def test_rects_overlap(a: Rect, b: Rect, expected: bool) -> None:
    assert rects_overlap(a, b) is expected
    assert rects_overlap(b, a) is expected


def test_rect_edges() -> None:
    r = Rect(3, 4, 10, 20)
    assert (r.left, r.right, r.top, r.bottom) == (3, 13, 4, 24)


def test_gravity_is_applied_before_position() -> None:
    core = PhysicsCore(gravity=0.35, jump_impulse=-7.5, floor_y=540)
    actor = Actor(x=80, y=300, width=34, height=24, vy=1.0)

    core.apply_gravity_and_movement(actor)

    assert actor.vy == pytest.approx(1.35)
    assert actor.y == pytest.approx(301.35)


def test_rotation_is_clamped() -> None:
    core = PhysicsCore(gravity=0.35, jump_impulse=-7.5, floor_y=540)
    falling = Actor(x=80, y=100, width=34, height=24, vy=30.0)
    rising = Actor(x=80, y=100, width=34, height=24, vy=-30.0)
    gliding = Actor(x=80, y=100, width=34, height=24, vy=0.65)

    for actor in (falling, rising, gliding):
        core.apply_gravity_and_movement(actor)

    assert falling.rotation == pytest.approx(math.pi / 4)
    assert rising.rotation == pytest.approx(-math.pi / 4)
    assert gliding.rotation == pytest.approx(0.1)


def test_jump_sets_velocity() -> None:
    core = PhysicsCore(gravity=0.35, jump_impulse=-7.5, floor_y=540)
    actor = Actor(x=80, y=300, width=34, height=24, vy=6.0)
    core.jump(actor)
    assert actor.vy == -7.5
    assert actor.y == 300


@pytest.mark.parametrize(
    ("y", "expected"),
    [(300, False), (0, False), (515.9, False), (516, True), (600, True), (-0.1, True)],
)
def test_out_of_bounds(y: float, expected: bool) -> None:
    core = PhysicsCore(gravity=0.35, jump_impulse=-7.5, floor_y=540)
    assert core.out_of_bounds(Actor(x=80, y=y, width=34, height=24)) is expected


def test_obstacle_rects_and_hits() -> None:
    core = PhysicsCore(gravity=0.35, jump_impulse=-7.5, floor_y=540)
    obstacle = Obstacle(x=100, gate=200, gap=140, width=52, speed=2.5)

    assert obstacle.upper_rect() == Rect(100, 0, 52, 200)
    assert obstacle.lower_rect(540) == Rect(100, 340, 52, 200)

    in_gap = Actor(x=90, y=250, width=34, height=24)
    in_column = Actor(x=90, y=150, width=34, height=24)
    on_lower = Actor(x=90, y=320, width=34, height=24)
    clear_left = Actor(x=40, y=150, width=34, height=24)

    assert not core.hits_obstacle(in_gap, obstacle)
    assert core.hits_obstacle(in_column, obstacle)
    assert core.hits_obstacle(on_lower, obstacle)
    assert not core.hits_obstacle(clear_left, obstacle)
