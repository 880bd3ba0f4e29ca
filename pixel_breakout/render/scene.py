"""
Draws a simulation state onto a canvas
"""

from typing import TYPE_CHECKING

from pixel_breakout.render.canvas import Canvas
from pixel_breakout.render.shapes import draw_circle, draw_rect
from pixel_breakout.render.text import blit, render_text
from pixel_breakout.utils.config import game_config

if TYPE_CHECKING:
    from pixel_breakout.core.interfaces.font import GlyphProvider
    from pixel_breakout.core.physics import Simulation


class DebugOverlay:
    """Text block drawn in the top-left corner of the frame"""

    def __init__(
        self,
        provider: "GlyphProvider",
        font_size: float | None = None,
        margin: int | None = None,
    ):
        self.provider = provider
        self.font_size = font_size if font_size is not None else game_config.FONT_SIZE
        self.margin = margin if margin is not None else game_config.OVERLAY_MARGIN

    def compose(self, lines: list[str]) -> Canvas:
        """Rasterizes the lines into one bitmap"""
        return render_text(self.provider, "\n".join(lines), self.font_size)

    def draw(self, canvas: Canvas, lines: list[str]) -> None:
        blit(canvas, self.compose(lines), self.margin, self.margin)


def draw_box(
    canvas: Canvas, x: float, y: float, width: float, height: float, color: int
) -> None:
    """Fills a world-space box anchored at its lower-left corner"""
    left, top = canvas.to_screen(x, y + height)
    draw_rect(
        canvas,
        left,
        top,
        canvas.world_length_to_pixels(width),
        canvas.world_height_to_pixels(height),
        color,
    )


def draw_scene(simulation: "Simulation", canvas: Canvas, overlay: DebugOverlay | None = None) -> None:
    """Clears the canvas and draws bricks, paddle, ball and the optional overlay"""
    canvas.fill(simulation.background_color)

    layout = simulation.bricks
    for brick in layout.bricks:
        draw_box(canvas, brick.x, brick.y, layout.width, layout.height, brick.color)

    paddle = simulation.paddle
    draw_box(
        canvas, paddle.position.x, paddle.position.y, paddle.width, paddle.height, paddle.color
    )

    ball = simulation.ball
    left, top = canvas.to_screen(ball.position.x, ball.position.y + ball.diameter)
    draw_circle(canvas, left, top, canvas.world_length_to_pixels(ball.diameter), ball.color)

    if overlay is not None:
        overlay.draw(canvas, simulation.debug_lines())
