"""
pygame font backend producing glyph coverage bitmaps
"""

import pygame

from pixel_breakout.render.text import Glyph, GlyphRun

WHITE_RGB = (255, 255, 255)


class PygameGlyphProvider:
    """GlyphProvider backed by pygame.font, one cached Font per pixel size"""

    def __init__(self, font_path: str | None = None):
        """
        Args:
            font_path: TrueType file to load, or None for pygame's default font
        """
        if not pygame.font.get_init():
            pygame.font.init()
        self.font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: float) -> pygame.font.Font:
        key = max(1, round(size))
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(self.font_path, key)
        return self._fonts[key]

    def shape(self, text: str, size: float) -> GlyphRun:
        """Renders each character on its own and lays them out by advance"""
        font = self._font(size)
        metrics = font.metrics(text) if text else []

        glyphs = []
        pen_x = 0.0
        for char, metric in zip(text, metrics):
            surface = font.render(char, True, WHITE_RGB)
            # array_alpha is indexed (x, y), coverage is (row, col)
            coverage = pygame.surfarray.array_alpha(surface).T / 255.0
            advance = float(metric[4]) if metric is not None else float(surface.get_width())
            glyphs.append(Glyph(coverage, int(round(pen_x)), 0, advance))
            pen_x += advance

        return GlyphRun(glyphs)

    def line_height(self, size: float) -> float:
        return float(self._font(size).get_linesize())
