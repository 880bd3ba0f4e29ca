"""
Font protocol - the capability the text compositor consumes
"""

from typing import Protocol

from pixel_breakout.render.text import GlyphRun


class GlyphProvider(Protocol):
    """
    Protocol for font backends.

    Implementations own font files and outline rasterization; the game only
    ever sees coverage bitmaps.
    """

    def shape(self, text: str, size: float) -> GlyphRun:
        """
        Shape a single line of text.

        Args:
            text: Line to shape, without newlines
            size: Font size in points

        Returns:
            GlyphRun: glyph coverage bitmaps positioned inside the line
        """
        ...

    def line_height(self, size: float) -> float:
        """Height in pixels of one line at the given size"""
        ...
