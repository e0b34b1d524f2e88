"""
Arcade Pong game entities: ball, paddles, score and run state
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from arcade_pong.utils.config import game_config


class Side(Enum):
    """Side of the field, used both for paddles and for scorers"""

    PLAYER = "player"
    CPU = "cpu"

    @property
    def opponent(self) -> "Side":
        return Side.CPU if self is Side.PLAYER else Side.PLAYER

    @property
    def direction(self) -> int:
        """Horizontal direction pointing toward this side (-1 left, 1 right)"""
        return -1 if self is Side.PLAYER else 1


class RunState(Enum):
    """Whether the simulation moves anything when advanced"""

    RUNNING = "running"
    PAUSED_FOR_SERVE = "paused_for_serve"
    PAUSED_UNFOCUSED = "paused_unfocused"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def lerp(self, other: "Vector2D", t: float) -> "Vector2D":
        """Point at fraction t of the segment going from self to other"""
        return Vector2D(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class Field:
    """Immutable playing field bounds"""

    width: float
    height: float

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.width / 2, self.height / 2)


class Ball:
    """Game ball"""

    def __init__(
        self, x: float, y: float, vx: float = 0.0, vy: float = 0.0, radius: float | None = None
    ):
        self.position = Vector2D(x, y)
        self.prev_position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS
        self.speed = self.velocity.magnitude()

    def update(self, dt: float) -> None:
        """Updates the ball position"""
        self.prev_position = self.position.copy()
        self.position = self.position + self.velocity * dt

    def launch(self, direction: int, angle: float) -> None:
        """Sets the velocity from the current speed, a horizontal direction and an angle"""
        self.velocity = Vector2D(
            direction * self.speed * math.cos(angle), self.speed * math.sin(angle)
        )

    def reset_to_center(self, field: Field, speed: float) -> None:
        """Moves the ball back to the center of the field and resets its speed"""
        self.position = field.center
        self.prev_position = field.center
        self.speed = speed
        self.velocity = Vector2D(0.0, 0.0)

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y


class Paddle:
    """Paddle moving vertically on its own side of the field"""

    def __init__(
        self,
        x: float,
        y: float,
        side: Side,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
        field_height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = speed if speed is not None else game_config.PLAYER_PADDLE_SPEED

        field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT
        self.min_y = 0.0
        self.max_y = field_height - self.height
        self.constrain_position()

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move(self, move_y: float, dt: float) -> None:
        """Moves the paddle vertically, move_y being a fraction of its speed"""
        self.position.y += move_y * self.speed * dt
        self.constrain_position()

    def move_to(self, center_y: float) -> None:
        """Snaps the paddle center to a target height"""
        self.position.y = center_y - self.height / 2
        self.constrain_position()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class Action:
    """Paddle command"""

    move_y: float  # -1.0 (up) to 1.0 (down)

    def __post_init__(self) -> None:
        self.move_y = float(max(-1, min(1, self.move_y)))


@dataclass
class ScoreState:
    """Points scored by each side"""

    player: int = 0
    cpu: int = 0

    def award(self, side: Side) -> None:
        if side is Side.PLAYER:
            self.player += 1
        else:
            self.cpu += 1

    def reset(self) -> None:
        self.player = 0
        self.cpu = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.player, self.cpu)


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of the game for presenters"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_radius: float
    ball_speed: float
    player_rect: tuple[float, float, float, float]
    cpu_rect: tuple[float, float, float, float]
    score: tuple[int, int]
    run_state: RunState
    field_bounds: tuple[float, float]
