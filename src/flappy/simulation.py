"""
simulation.py: The per-tick world simulation.
"""

from dataclasses import dataclass, field
from typing import List

from .config import GameConfig
from .data_models import Actor, Obstacle, RunState, StepResult
from .obstacles import ObstacleGenerator
from .physics_core import PhysicsCore


@dataclass
class SimulationContext:
    """
    All mutable state of one run. A new context is built for every run;
    nothing is shared between runs.
    """
    config: GameConfig
    generator: ObstacleGenerator
    actor: Actor
    obstacles: List[Obstacle]
    run_state: RunState = field(default_factory=RunState)
    physics: PhysicsCore = field(init=False)

    def __post_init__(self):
        self.physics = PhysicsCore(
            gravity=self.run_state.gravity,
            jump_impulse=self.config.jump_impulse,
            floor_y=self.config.floor_y,
        )

    @classmethod
    def fresh(cls, config: GameConfig, generator: ObstacleGenerator) -> "SimulationContext":
        actor = Actor(
            x=float(config.actor_x),
            y=config.playfield_height / 2,
            width=config.actor_width,
            height=config.actor_height,
        )
        return cls(
            config=config,
            generator=generator,
            actor=actor,
            obstacles=generator.initial_obstacles(),
            run_state=RunState(gravity=config.gravity),
        )


def step(context: SimulationContext) -> StepResult:
    """
    Advances the run by one tick and reports whether it hit something.

    Obstacles are handled in a single pass: each one moves, is recycled if it
    left the playfield, and is then tested against the actor. Siblings later
    in the list have not moved yet when an earlier one is recycled.
    """
    run_state = context.run_state
    actor = context.actor
    physics = context.physics

    # 1. Frame counter
    run_state.frames += 1

    # 2. Actor physics
    physics.apply_gravity_and_movement(actor)

    # 3. Move, recycle and test obstacles
    collided = False
    recycled = 0
    for obstacle in context.obstacles:
        obstacle.x -= obstacle.speed
        if obstacle.right < 0:
            context.generator.recycle(obstacle, context.obstacles)
            run_state.score += 1
            recycled += 1

        if physics.hits_obstacle(actor, obstacle):
            collided = True

    # 4. Floor / ceiling
    if physics.out_of_bounds(actor):
        collided = True

    return StepResult(collided=collided, score=run_state.score, recycled=recycled)
