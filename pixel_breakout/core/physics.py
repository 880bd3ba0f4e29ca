"""
Physics system for Pixel Breakout
"""

import logging
import math
from typing import Any

from pixel_breakout.core.collision import CollisionDetector
from pixel_breakout.core.entities import Ball, BrickLayout, Paddle, PaddleDirection
from pixel_breakout.render.canvas import Canvas
from pixel_breakout.render.scene import DebugOverlay, draw_scene
from pixel_breakout.utils.config import game_config

logger = logging.getLogger(__name__)


class Simulation:
    """Ball, paddle and bricks, advanced one discrete tick at a time"""

    def __init__(
        self,
        ball: Ball | None = None,
        paddle: Paddle | None = None,
        bricks: BrickLayout | None = None,
    ):
        self.collision_detector = CollisionDetector()
        self.ball = ball if ball is not None else self._initial_ball()
        self.paddle = paddle if paddle is not None else self._initial_paddle()
        self.bricks = bricks if bricks is not None else BrickLayout.single_row()
        self.background_color = game_config.BACKGROUND_COLOR
        self.tick_count = 0

    @staticmethod
    def _initial_ball() -> Ball:
        x, y = game_config.BALL_START
        vx, vy = game_config.BALL_VELOCITY
        return Ball(x, y, vx, vy)

    @staticmethod
    def _initial_paddle() -> Paddle:
        paddle = Paddle(game_config.PADDLE_START_X)
        paddle.constrain_position()
        return paddle

    def reset(self) -> None:
        """Puts the ball and paddle back to their starting state"""
        self.ball = self._initial_ball()
        self.paddle = self._initial_paddle()
        self.tick_count = 0

    def update_paddle_pos(self) -> None:
        """Moves the paddle by its velocity, clamped to [-1, 1 - width]"""
        self.paddle.update()

    def tick(self) -> dict[str, Any]:
        """
        Advances the simulation by one step.

        Paddle collision is resolved against the current velocity, before wall
        reflection and before the position is folded back inside the arena.

        Returns:
            Events of this tick: {"paddle_hit": bool, "wall_bounces": list[str]}
        """
        self.update_paddle_pos()

        tentative = self.ball.position + self.ball.velocity

        paddle_hit = self.collision_detector.check_ball_paddle(self.ball, self.paddle, tentative)
        wall_bounces = self.collision_detector.check_ball_walls(self.ball, tentative)
        self.collision_detector.resolve_position(self.ball, tentative)

        self.tick_count += 1
        return {"paddle_hit": paddle_hit, "wall_bounces": wall_bounces}

    def set_paddle_direction(self, direction: PaddleDirection) -> None:
        """Steering input: LEFT, RIGHT or NONE"""
        self.paddle.set_direction(direction)

    def scale_ball_speed(self, factor: float) -> None:
        """Multiplies the ball velocity by factor"""
        if not math.isfinite(factor) or factor < 0:
            raise ValueError(f"Speed factor must be a finite non-negative number, got {factor}")

        self.ball.scale_speed(factor)
        logger.debug("Ball speed scaled by %s to %.5f", factor, self.ball.speed())

    def draw(self, canvas: Canvas, overlay: DebugOverlay | None = None) -> None:
        """Renders the current state onto canvas"""
        draw_scene(self, canvas, overlay)

    def get_state(self) -> dict[str, Any]:
        """Returns the complete simulation state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.speed(),
            "paddle_position": self.paddle.position.to_tuple(),
            "paddle_velocity": self.paddle.vel_x,
            "brick_count": len(self.bricks),
            "tick": self.tick_count,
        }

    def debug_lines(self) -> list[str]:
        """Text lines shown by the debug overlay"""
        state = self.get_state()
        ball_x, ball_y = state["ball_position"]
        vel_x, vel_y = state["ball_velocity"]
        paddle_x, _ = state["paddle_position"]
        return [
            f"tick {state['tick']}",
            f"ball {ball_x:+.3f} {ball_y:+.3f}",
            f"vel {vel_x:+.4f} {vel_y:+.4f}",
            f"speed {state['ball_speed']:.4f}",
            f"paddle {paddle_x:+.3f}",
        ]
