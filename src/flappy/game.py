"""
game.py: The Idle -> Playing -> Ended state machine and the game orchestrator.
"""

import logging
import random
from typing import Callable, Optional

from statemachine import State, StateMachine

from .config import GameConfig
from .constants import WING_FRAME_TICKS, WING_FRAMES
from .data_models import ActorView, GameSnapshot, GameState, ObstacleView
from .obstacles import ObstacleGenerator
from .simulation import SimulationContext, step

logger = logging.getLogger(__name__)

GameOverSink = Callable[[int], object]


class RunMachine(StateMachine):
    """Three-state run lifecycle. Ended is transient: `settle` follows `crash` immediately."""

    idle = State("Idle", value=GameState.IDLE, initial=True)
    playing = State("Playing", value=GameState.PLAYING)
    ended = State("Ended", value=GameState.ENDED)

    begin = idle.to(playing)
    crash = playing.to(ended)
    settle = ended.to(idle)

    def __init__(self, game_over_sink: Optional[GameOverSink] = None):
        self.game_over_sink = game_over_sink
        super().__init__()

    def on_enter_ended(self, score: int) -> None:
        if self.game_over_sink is None:
            return
        try:
            self.game_over_sink(score)
        except Exception:
            logger.exception("Game-over sink failed for score %d", score)


class Game:
    """
    Owns the current run and turns "activate" events and host ticks into
    simulation steps and state transitions.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 on_game_over: Optional[GameOverSink] = None):
        self.config = config or GameConfig()
        # Raises ConfigurationError before any run can start
        self.generator = ObstacleGenerator(self.config, rng)
        self.context = SimulationContext.fresh(self.config, self.generator)
        self.last_score: Optional[int] = None
        self._machine = RunMachine(game_over_sink=on_game_over)

    @property
    def state(self) -> GameState:
        return self._machine.current_state.value

    @property
    def score(self) -> int:
        return self.context.run_state.score

    def handle_activate(self) -> None:
        """Starts a run when idle, jumps while playing."""
        if self.state is GameState.IDLE:
            self.context = SimulationContext.fresh(self.config, self.generator)
            self._machine.begin()
            logger.info("Run started")
        elif self.state is GameState.PLAYING:
            self.context.physics.jump(self.context.actor)

    def tick(self) -> GameSnapshot:
        """One host scheduler tick."""
        if self.state is GameState.PLAYING:
            result = step(self.context)
            if result.collided:
                self._end_run(result.score)
        return self.snapshot()

    def _end_run(self, score: int):
        self.last_score = score
        self._machine.crash(score=score)
        logger.info("Run ended after %d frames. Final score: %d",
                    self.context.run_state.frames, score)
        self._machine.settle()

    def snapshot(self) -> GameSnapshot:
        actor = self.context.actor
        run_state = self.context.run_state
        return GameSnapshot(
            state=self.state,
            score=run_state.score,
            frames=run_state.frames,
            actor=ActorView(actor.x, actor.y, actor.width, actor.height, actor.rotation),
            obstacles=tuple(
                ObstacleView(o.x, o.width, o.gate, o.gap) for o in self.context.obstacles
            ),
            wing_frame=(run_state.frames // WING_FRAME_TICKS) % WING_FRAMES,
            last_score=self.last_score,
        )
