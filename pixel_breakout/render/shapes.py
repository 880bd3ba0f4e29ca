"""
Shape rasterizer: filled circles and axis-aligned rectangles

Both primitives clip against the canvas, so any position is safe to draw.
"""

import numpy as np

from pixel_breakout.render.canvas import Canvas


def draw_rect(canvas: Canvas, x: int, y: int, width: int, height: int, color: int) -> None:
    """Fills [x, x+width) x [y, y+height) with color"""
    if width <= 0 or height <= 0:
        return

    bounds = canvas.clip(x, y, width, height)
    if bounds is None:
        return

    x0, y0, x1, y1 = bounds
    grid = canvas.view()
    for row in range(y0, y1):
        grid[row, x0:x1] = color


def draw_circle(canvas: Canvas, x: int, y: int, diameter: int, color: int) -> None:
    """
    Fills the circle inscribed in the square [x, x+diameter) x [y, y+diameter).

    A pixel is inside when the squared distance from the square's center to the
    pixel's center is strictly less than radius squared.
    """
    if diameter <= 0:
        return

    bounds = canvas.clip(x, y, diameter, diameter)
    if bounds is None:
        return

    radius = diameter / 2
    center_x = x + radius
    center_y = y + radius

    x0, y0, x1, y1 = bounds
    rows = np.arange(y0, y1)[:, np.newaxis] + 0.5
    cols = np.arange(x0, x1)[np.newaxis, :] + 0.5
    inside = (cols - center_x) ** 2 + (rows - center_y) ** 2 < radius * radius

    region = canvas.view()[y0:y1, x0:x1]
    region[inside] = color
