"""Pixel surfaces the playback scheduler paints onto and reads colors from."""

from abc import ABC, abstractmethod

import numpy as np

from models import BACKGROUND_COLOR, RasterImage

Color = "tuple[int, int, int]"


class Surface(ABC):
    """A pixel-addressable 2D drawing target."""

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    def ready(self) -> bool:
        """Whether the surface can be drawn on right now."""
        return True

    @abstractmethod
    def resize(self, width: int, height: int): ...

    @abstractmethod
    def fill(self, color: Color): ...

    @abstractmethod
    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color):
        """Fill a rectangle, clipped to the surface bounds."""

    @abstractmethod
    def pixel(self, x: int, y: int) -> Color: ...

    def set_pixel(self, x: int, y: int, color: Color):
        self.fill_rect(x, y, 1, 1, color)


class ArraySurface(Surface):
    """Surface backed by an (height, width, 3) uint8 numpy buffer.

    AIDEV-NOTE: The UI canvas displays `buffer` directly, so it must stay
    C-contiguous. resize() swaps in a new array instead of reshaping.
    """

    def __init__(
        self, width: int = 1, height: int = 1, background: Color = BACKGROUND_COLOR
    ):
        self.background = tuple(background)
        self.buffer = self._blank(width, height)

    def _blank(self, width: int, height: int) -> np.ndarray:
        buffer = np.empty((max(1, height), max(1, width), 3), dtype=np.uint8)
        buffer[:] = self.background
        return buffer

    @property
    def width(self) -> int:
        return self.buffer.shape[1]

    @property
    def height(self) -> int:
        return self.buffer.shape[0]

    def resize(self, width: int, height: int):
        if (width, height) != (self.width, self.height):
            self.buffer = self._blank(width, height)

    def fill(self, color: Color):
        self.buffer[:] = color

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color):
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + width, self.width), min(y + height, self.height)
        if x0 < x1 and y0 < y1:
            self.buffer[y0:y1, x0:x1] = color

    def set_pixel(self, x: int, y: int, color: Color):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.buffer[y, x] = color

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self.buffer[y, x]
        return int(r), int(g), int(b)


class ColorSource:
    """Read-only lookup of true source colors at working resolution."""

    def __init__(self, image: RasterImage):
        self._rgb = np.array(image.rgb, dtype=np.uint8)
        self._rgb.setflags(write=False)

    @property
    def width(self) -> int:
        return self._rgb.shape[1]

    @property
    def height(self) -> int:
        return self._rgb.shape[0]

    def color_at(self, x: int, y: int) -> Color:
        r, g, b = self._rgb[y, x]
        return int(r), int(g), int(b)
