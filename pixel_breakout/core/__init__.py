"""
Core module of Pixel Breakout
"""

from pixel_breakout.core.entities import Ball
from pixel_breakout.core.entities import Brick
from pixel_breakout.core.entities import BrickLayout
from pixel_breakout.core.entities import Paddle
from pixel_breakout.core.entities import PaddleDirection
from pixel_breakout.core.entities import Vector2D
from pixel_breakout.core.physics import Simulation

__all__ = [
    "Ball",
    "Brick",
    "BrickLayout",
    "Paddle",
    "PaddleDirection",
    "Simulation",
    "Vector2D",
]
