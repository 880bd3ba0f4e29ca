"""
Collision detection system for Pixel Breakout

Tests run on the ball's tentative box, i.e. where the ball would be after
moving by its current velocity.
"""

import logging
import math
from enum import Enum

from pixel_breakout.core.entities import Ball, Paddle, Vector2D

logger = logging.getLogger(__name__)

SQRT_3 = math.sqrt(3.0)


class PaddleZone(Enum):
    """Thirds of the paddle, each with its own bounce direction"""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"

    @property
    def direction(self) -> Vector2D:
        """Unnormalized direction the velocity is reflected about"""
        return _ZONE_DIRECTIONS[self]


_ZONE_DIRECTIONS = {
    PaddleZone.LEFT: Vector2D(-1.0, SQRT_3),
    PaddleZone.MIDDLE: Vector2D(0.0, 1.0),
    PaddleZone.RIGHT: Vector2D(1.0, SQRT_3),
}


def rects_overlap(
    rect1: tuple[float, float, float, float], rect2: tuple[float, float, float, float]
) -> bool:
    """Strict overlap of two (x, y, width, height) boxes; touching edges do not count"""
    x1, y1, w1, h1 = rect1
    x2, y2, w2, h2 = rect2
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


def paddle_hit_location(ball_x: float, ball_diameter: float, paddle: Paddle) -> float:
    """Where the ball's center falls along the paddle, 0 at the left edge and 1 at the right"""
    center_x = ball_x + ball_diameter / 2
    location = (center_x - paddle.position.x) / paddle.width
    return max(0.0, min(1.0, location))


def paddle_zone(hit_location: float) -> PaddleZone:
    """Picks the zone for a hit location; each zone includes its lower boundary"""
    if hit_location < 1 / 3:
        return PaddleZone.LEFT
    if hit_location < 2 / 3:
        return PaddleZone.MIDDLE
    return PaddleZone.RIGHT


def reflect(velocity: Vector2D, direction: Vector2D) -> Vector2D:
    """
    Reflects velocity about direction, keeping the original speed.

    Formula: v' = v - 2(v·n)n with n the normalized direction. A zero velocity
    or zero direction leaves the velocity unchanged.
    """
    speed = velocity.magnitude()
    normal = direction.normalize()
    if speed == 0 or normal.magnitude() == 0:
        return velocity.copy()

    dot_product = velocity.dot(normal)
    reflected = velocity - normal * (2 * dot_product)

    # Rescale to the incoming speed to cancel rounding drift
    return reflected.normalize() * speed


def fold_back(value: float, low: float, high: float) -> float:
    """Mirrors an overshoot past either bound back inside [low, high]"""
    if value > high:
        value = high - (value - high)
    elif value < low:
        value = low + (low - value)

    # A step longer than the whole range would fold past the other bound
    return max(low, min(high, value))


def apply_paddle_bounce(ball: Ball, paddle: Paddle, tentative: Vector2D) -> PaddleZone | None:
    """
    Bounces the ball off the paddle zone it hits.

    Returns:
        The zone used, or None if the ball is not moving
    """
    if ball.speed() == 0:
        return None

    hit_location = paddle_hit_location(tentative.x, ball.diameter, paddle)
    zone = paddle_zone(hit_location)
    reflected = reflect(ball.velocity, zone.direction)

    # A tilted surface hit steeply or from behind would send the ball down
    if reflected.y <= 0:
        reflected = reflect(ball.velocity, PaddleZone.MIDDLE.direction)

    ball.velocity = reflected
    logger.debug("Paddle hit at %.3f (%s zone)", hit_location, zone.value)
    return zone


class CollisionDetector:
    """Main collision manager"""

    def check_ball_paddle(self, ball: Ball, paddle: Paddle, tentative: Vector2D) -> bool:
        """Checks and handles ball-paddle collision for the tentative position"""
        # Only a ball moving down can be approaching the paddle
        if ball.velocity.y >= 0:
            return False

        if not rects_overlap(ball.get_rect(tentative), paddle.get_rect()):
            return False

        return apply_paddle_bounce(ball, paddle, tentative) is not None

    def check_ball_walls(self, ball: Ball, tentative: Vector2D) -> list[str]:
        """
        Points the velocity back inside for each wall the tentative position reaches.

        Returns:
            The walls hit, among "left", "right", "bottom" and "top"
        """
        walls = []

        if tentative.x <= -1.0:
            ball.velocity.x = abs(ball.velocity.x)
            walls.append("left")
        elif tentative.x >= ball.max_x:
            ball.velocity.x = -abs(ball.velocity.x)
            walls.append("right")

        if tentative.y <= -1.0:
            ball.velocity.y = abs(ball.velocity.y)
            walls.append("bottom")
        elif tentative.y >= ball.max_y:
            ball.velocity.y = -abs(ball.velocity.y)
            walls.append("top")

        return walls

    def resolve_position(self, ball: Ball, tentative: Vector2D) -> None:
        """Moves the ball to the tentative position, folding overshoots back inside"""
        ball.position = Vector2D(
            fold_back(tentative.x, -1.0, ball.max_x),
            fold_back(tentative.y, -1.0, ball.max_y),
        )
