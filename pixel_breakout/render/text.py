"""
Text compositor for Pixel Breakout

Turns pre-rasterized glyph coverage bitmaps into line bitmaps, stacks lines
into a uniform-stride block and blits bitmaps onto a canvas. Font loading
and shaping are left to an injected GlyphProvider.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from pixel_breakout.render.canvas import WHITE
from pixel_breakout.render.canvas import Canvas

if TYPE_CHECKING:
    from pixel_breakout.core.interfaces.font import GlyphProvider

logger = logging.getLogger(__name__)

BLANK_COLOR = WHITE


@dataclass
class Glyph:
    """A shaped glyph: coverage bitmap plus its placement inside the line"""

    coverage: npt.NDArray[np.float64]  # (rows, cols), values in [0, 1]
    x: int  # left edge within the line bitmap
    y: int  # top edge within the line bitmap
    advance: float

    def __post_init__(self) -> None:
        self.coverage = np.asarray(self.coverage, dtype=np.float64)
        if self.coverage.ndim != 2:
            raise ValueError(f"Glyph coverage must be 2-D, got shape {self.coverage.shape}")


@dataclass
class GlyphRun:
    """A single line of shaped glyphs"""

    glyphs: list[Glyph] = field(default_factory=list)

    @property
    def advance_width(self) -> float:
        return sum(glyph.advance for glyph in self.glyphs)


def coverage_to_grey(coverage: npt.ArrayLike) -> npt.NDArray[np.uint32]:
    """Maps coverage in [0, 1] to packed grey pixels, 1 being black"""
    values = np.clip(np.asarray(coverage, dtype=np.float64), 0.0, 1.0)
    grey = np.rint(255.0 * (1.0 - values)).astype(np.uint32)
    return grey * np.uint32(0x010101)


def rasterize_line(run: GlyphRun, line_height: float) -> Canvas:
    """
    Rasterizes one line of glyphs onto a blank bitmap.

    The bitmap is ceil(advance_width) wide and ceil(line_height) tall.
    Glyph pixels falling outside it are clipped.
    """
    width = max(1, math.ceil(run.advance_width))
    height = max(1, math.ceil(line_height))
    line = Canvas.blank(width, height, BLANK_COLOR)
    grid = line.view()

    for glyph in run.glyphs:
        rows, cols = glyph.coverage.shape
        bounds = line.clip(glyph.x, glyph.y, cols, rows)
        if bounds is None:
            continue

        x0, y0, x1, y1 = bounds
        coverage = glyph.coverage[y0 - glyph.y : y1 - glyph.y, x0 - glyph.x : x1 - glyph.x]
        # Zero coverage keeps whatever an overlapping neighbour already drew
        covered = coverage > 0.0
        grid[y0:y1, x0:x1][covered] = coverage_to_grey(coverage[covered])

    return line


def rasterize_multiline(runs: Sequence[GlyphRun], line_height: float) -> Canvas:
    """
    Rasterizes several lines into one block with a uniform stride.

    Shorter lines are right-padded with the blank color up to the widest one.
    """
    if not runs:
        raise ValueError("rasterize_multiline needs at least one line")

    lines = [rasterize_line(run, line_height) for run in runs]
    max_stride = max(line.stride for line in lines)

    rows = []
    for line in lines:
        padded = np.full((line.height, max_stride), BLANK_COLOR, dtype=np.uint32)
        padded[:, : line.stride] = line.view()
        rows.append(padded)

    return Canvas(np.concatenate(rows).ravel(), max_stride)


def blit(dst: Canvas, src: Canvas, offset_x: int, offset_y: int) -> None:
    """Copies src onto dst with its top-left corner at (offset_x, offset_y), clipping to dst"""
    bounds = dst.clip(offset_x, offset_y, src.width, src.height)
    if bounds is None:
        logger.debug("Blit of %r at (%d, %d) is fully outside %r", src, offset_x, offset_y, dst)
        return

    x0, y0, x1, y1 = bounds
    dst_grid = dst.view()
    src_grid = src.view()
    for row in range(y0, y1):
        src_row = row - offset_y
        dst_grid[row, x0:x1] = src_grid[src_row, x0 - offset_x : x1 - offset_x]


def render_text(provider: "GlyphProvider", text: str, size: float) -> Canvas:
    """Shapes and rasterizes a possibly multi-line string"""
    runs = [provider.shape(line, size) for line in text.split("\n")]
    return rasterize_multiline(runs, provider.line_height(size))
