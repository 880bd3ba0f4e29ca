"""
Software rasterization for Pixel Breakout
"""

from pixel_breakout.render.canvas import Canvas
from pixel_breakout.render.shapes import draw_circle, draw_rect
from pixel_breakout.render.text import Glyph, GlyphRun, blit, rasterize_line, rasterize_multiline

__all__ = [
    "Canvas",
    "draw_circle",
    "draw_rect",
    "Glyph",
    "GlyphRun",
    "rasterize_line",
    "rasterize_multiline",
    "blit",
]
