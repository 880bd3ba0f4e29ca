"""
Addressable pixel buffer for Pixel Breakout

Pixels are packed 0xRRGGBB integers stored in a flat numpy array in
row-major order: pixel (x, y) lives at index y * stride + x.
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

WHITE = 0xFFFFFF
BLACK = 0x000000


class Canvas:
    """Flat packed-RGB pixel buffer with a row stride"""

    def __init__(self, pixels: Sequence[int] | npt.NDArray[np.uint32], stride: int):
        array = np.ascontiguousarray(pixels, dtype=np.uint32)
        if array.ndim != 1:
            raise ValueError(f"Canvas pixels must be one-dimensional, got shape {array.shape}")
        if stride <= 0:
            raise ValueError(f"Canvas stride must be positive, got {stride}")
        if array.size == 0 or array.size % stride != 0:
            raise ValueError(
                f"Canvas pixel count ({array.size}) must be a non-zero multiple of stride ({stride})"
            )

        self.pixels = array
        self.stride = stride

    @classmethod
    def blank(cls, width: int, height: int, color: int = BLACK) -> "Canvas":
        """Creates a canvas of the given size filled with one color"""
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        return cls(np.full(width * height, color, dtype=np.uint32), width)

    @property
    def width(self) -> int:
        return self.stride

    @property
    def height(self) -> int:
        return self.pixels.size // self.stride

    def view(self) -> npt.NDArray[np.uint32]:
        """Returns a (height, width) view sharing memory with the pixels"""
        return self.pixels.reshape(self.height, self.stride)

    def fill(self, color: int) -> None:
        """Sets every pixel to color"""
        self.pixels.fill(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Returns the packed color at (x, y)"""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return int(self.pixels[y * self.stride + x])

    def clip(self, x: int, y: int, width: int, height: int) -> tuple[int, int, int, int] | None:
        """
        Intersects the rectangle [x, x+width) x [y, y+height) with the canvas.

        Returns:
            (x0, y0, x1, y1) bounds of the visible part, or None if nothing is visible
        """
        x0 = max(0, x)
        y0 = max(0, y)
        x1 = min(self.width, x + width)
        y1 = min(self.height, y + height)
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1, y1

    def to_screen(self, world_x: float, world_y: float) -> tuple[int, int]:
        """Maps world coordinates (+y up) to pixel coordinates (+y down)"""
        x = int((world_x + 1.0) / 2.0 * self.width)
        y = int((1.0 - world_y) / 2.0 * self.height)
        return x, y

    def world_length_to_pixels(self, length: float) -> int:
        """Converts a horizontal world length to pixels"""
        return int(length / 2.0 * self.width)

    def world_height_to_pixels(self, length: float) -> int:
        """Converts a vertical world length to pixels"""
        return int(length / 2.0 * self.height)

    def to_rgb_array(self) -> npt.NDArray[np.uint8]:
        """Unpacks the pixels into a (height, width, 3) uint8 array"""
        grid = self.view()
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (grid >> 16) & 0xFF
        rgb[..., 1] = (grid >> 8) & 0xFF
        rgb[..., 2] = grid & 0xFF
        return rgb

    def copy(self) -> "Canvas":
        return Canvas(self.pixels.copy(), self.stride)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
