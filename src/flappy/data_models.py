"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import GRAVITY


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, top-left origin, y grows downward."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


class GameState(Enum):
    """The three phases of the game loop."""
    IDLE = "idle"
    PLAYING = "playing"
    ENDED = "ended"


@dataclass
class Actor:
    """The player-controlled falling/jumping entity."""
    x: float
    y: float
    width: int
    height: int
    vy: float = 0.0
    rotation: float = 0.0           # Cosmetic only, never read by the simulation

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class Obstacle:
    """A pair of blocking columns with a gate the actor must pass through."""
    x: float
    gate: int                       # Top of the gap, measured from the playfield top
    gap: int
    width: int
    speed: float

    @property
    def right(self) -> float:
        return self.x + self.width

    def upper_rect(self) -> Rect:
        return Rect(self.x, 0, self.width, self.gate)

    def lower_rect(self, floor_y: float) -> Rect:
        top = self.gate + self.gap
        return Rect(self.x, top, self.width, floor_y - top)


@dataclass
class RunState:
    """Per-run counters."""
    frames: int = 0
    score: int = 0
    gravity: float = GRAVITY


@dataclass
class StepResult:
    """Outcome of a single simulation tick."""
    collided: bool
    score: int
    recycled: int = 0


# ---------- Read-only projections for the render adapter ----------

@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    width: int
    height: int
    rotation: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    width: int
    gate: int
    gap: int


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs to draw one frame."""
    state: GameState
    score: int
    frames: int
    actor: ActorView
    obstacles: Tuple[ObstacleView, ...]
    wing_frame: int = 0
    last_score: Optional[int] = None
