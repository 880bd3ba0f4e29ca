"""
Shared fixtures for Pixel Breakout tests
"""

import numpy as np
import pytest

from pixel_breakout.render.text import Glyph, GlyphRun


class FakeGlyphProvider:
    """Block font: every visible character is a solid box, spaces are empty"""

    def __init__(self, glyph_width: int = 4, glyph_height: int = 6, advance: int = 5, line: int = 8):
        self.glyph_width = glyph_width
        self.glyph_height = glyph_height
        self.advance = advance
        self.line = line

    def shape(self, text: str, size: float) -> GlyphRun:
        glyphs = []
        for i, char in enumerate(text):
            value = 0.0 if char.isspace() else 1.0
            coverage = np.full((self.glyph_height, self.glyph_width), value)
            glyphs.append(Glyph(coverage, i * self.advance, 1, float(self.advance)))
        return GlyphRun(glyphs)

    def line_height(self, size: float) -> float:
        return float(self.line)


@pytest.fixture
def glyph_provider() -> FakeGlyphProvider:
    return FakeGlyphProvider()
