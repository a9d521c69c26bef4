"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from .constants import MAX_ROTATION, ROTATION_DIVISOR
from .data_models import Actor, Obstacle, Rect


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Separating-axis test. Touching edges count as an overlap."""
    return not (
        a.right < b.left
        or a.left > b.right
        or a.bottom < b.top
        or a.top > b.bottom
    )


class PhysicsCore:
    """
    Actor integration and collision checks for a single playfield.
    """

    def __init__(self, gravity: float, jump_impulse: float, floor_y: float):
        self.gravity = gravity
        self.jump_impulse = jump_impulse
        self.floor_y = floor_y

    def apply_gravity_and_movement(self, actor: Actor):
        """
        Semi-implicit Euler: velocity is updated first, then position.
        """
        actor.vy += self.gravity
        actor.y += actor.vy
        actor.rotation = max(-MAX_ROTATION, min(MAX_ROTATION, actor.vy / ROTATION_DIVISOR))

    def jump(self, actor: Actor):
        actor.vy = self.jump_impulse

    def hits_obstacle(self, actor: Actor, obstacle: Obstacle) -> bool:
        box = actor.rect
        return (rects_overlap(box, obstacle.upper_rect())
                or rects_overlap(box, obstacle.lower_rect(self.floor_y)))

    def out_of_bounds(self, actor: Actor) -> bool:
        """Floor/ceiling check."""
        return actor.y + actor.height >= self.floor_y or actor.y < 0
