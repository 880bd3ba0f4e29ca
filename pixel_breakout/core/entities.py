"""
Pixel Breakout game entities: ball, paddle, bricks

World coordinates span [-1, 1] on both axes, +x right and +y up. Every box
is anchored at its lower-left corner.
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np

from pixel_breakout.utils.config import game_config


class PaddleDirection(Enum):
    """Paddle steering input"""

    LEFT = -1
    NONE = 0
    RIGHT = 1


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

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Ball:
    """Game ball"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        diameter: float | None = None,
        color: int | None = None,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.diameter = diameter if diameter is not None else game_config.BALL_DIAMETER
        self.color = color if color is not None else game_config.BALL_COLOR

    @property
    def max_x(self) -> float:
        return 1.0 - self.diameter

    @property
    def max_y(self) -> float:
        return 1.0 - self.diameter

    def speed(self) -> float:
        return self.velocity.magnitude()

    def scale_speed(self, factor: float) -> None:
        """Multiplies both velocity components by factor"""
        self.velocity *= factor

    def get_rect(self, position: Vector2D | None = None) -> tuple[float, float, float, float]:
        """Returns the collision box (x, y, width, height), optionally at another position"""
        pos = position if position is not None else self.position
        return (pos.x, pos.y, self.diameter, self.diameter)


class Paddle:
    """Player paddle, sliding horizontally along a fixed row"""

    def __init__(
        self,
        x: float,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
        color: int | None = None,
    ):
        self.position = Vector2D(x, y if y is not None else game_config.PADDLE_Y)
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.movement_speed = speed if speed is not None else game_config.PADDLE_SPEED
        self.color = color if color is not None else game_config.PADDLE_COLOR
        self.vel_x = 0.0

        # Movement limits
        self.min_x = -1.0
        self.max_x = 1.0 - self.width

    def set_direction(self, direction: PaddleDirection) -> None:
        """Turns a steering input into one of the three allowed velocities"""
        self.vel_x = direction.value * self.movement_speed

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.x = max(self.min_x, min(self.max_x, self.position.x))

    def update(self) -> None:
        """Moves the paddle by its velocity, with constraints"""
        self.position.x += self.vel_x
        self.constrain_position()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision box (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass(frozen=True)
class Brick:
    """Static brick, sized by its layout"""

    x: float
    y: float
    color: int


@dataclass(frozen=True)
class BrickLayout:
    """Ordered bricks sharing one size"""

    width: float
    height: float
    bricks: tuple[Brick, ...] = field(default_factory=tuple)

    @classmethod
    def single_row(
        cls,
        columns: int | None = None,
        width: float | None = None,
        height: float | None = None,
        gap: float | None = None,
        top: float | None = None,
        colors: list[int] | None = None,
    ) -> "BrickLayout":
        """Builds one horizontally centered row of bricks"""
        columns = columns if columns is not None else game_config.BRICK_COLUMNS
        width = width if width is not None else game_config.BRICK_WIDTH
        height = height if height is not None else game_config.BRICK_HEIGHT
        gap = gap if gap is not None else game_config.BRICK_GAP
        top = top if top is not None else game_config.BRICK_TOP
        colors = colors if colors is not None else game_config.BRICK_COLORS

        row_width = columns * width + max(columns - 1, 0) * gap
        left = -row_width / 2
        bricks = tuple(
            Brick(left + i * (width + gap), top - height, colors[i % len(colors)])
            for i in range(columns)
        )
        return cls(width, height, bricks)

    def __len__(self) -> int:
        return len(self.bricks)

    def get_rects(self) -> list[tuple[float, float, float, float]]:
        """Returns the boxes (x, y, width, height) of all bricks"""
        return [(brick.x, brick.y, self.width, self.height) for brick in self.bricks]
