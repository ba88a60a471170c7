"""
Pixel Buffer
============

RGBA pixel storage backed by a ``(height, width, 4)`` uint8 numpy array.

Pixels are addressed as ``(x, y)`` in the public API and stored row-major,
``pixels[y, x]``. :meth:`PixelBuffer.column` hands out a writable view over one
column; views of distinct columns never share memory, which is what lets the
rasterizer give each worker its own column without locking.
"""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from ..colors.rgb import ColorRGBA, as_rgba
from ..errors import OutOfBoundsError
from ..types.color_types import RGBA_CHANNELS


class PixelBuffer:
    __slots__ = ("_pixels",)

    def __init__(self, pixels: NDArray) -> None:
        if not isinstance(pixels, np.ndarray):
            raise TypeError(f"PixelBuffer expects a numpy array, got {type(pixels).__name__}")
        if pixels.ndim != 3 or pixels.shape[2] != RGBA_CHANNELS:
            raise ValueError(f"PixelBuffer expects shape (height, width, 4), got {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise TypeError(f"PixelBuffer expects dtype uint8, got {pixels.dtype}")
        if pixels.shape[0] <= 0 or pixels.shape[1] <= 0:
            raise ValueError(f"PixelBuffer dimensions must be positive, got {pixels.shape[1]}x{pixels.shape[0]}")
        self._pixels = pixels

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new(cls, width: int, height: int, fill: Union[ColorRGBA, Tuple[int, ...], None] = None) -> "PixelBuffer":
        """Allocate a ``width x height`` buffer, transparent black unless ``fill`` is given."""
        if width <= 0 or height <= 0:
            raise ValueError(f"buffer dimensions must be positive, got {width}x{height}")
        pixels = np.zeros((height, width, RGBA_CHANNELS), dtype=np.uint8)
        if fill is not None:
            pixels[...] = as_rgba(fill).to_array()
        return cls(pixels)

    @classmethod
    def from_array(cls, array: NDArray) -> "PixelBuffer":
        """Wrap a copy of an existing ``(height, width, 4)`` uint8 array."""
        return cls(np.array(array, dtype=np.uint8, copy=True))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Convert any Pillow image to an RGBA buffer."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def pixels(self) -> NDArray:
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    # ------------------ PIXEL ACCESS ------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> ColorRGBA:
        self._check(x, y)
        return ColorRGBA(self._pixels[y, x])

    def set(self, x: int, y: int, color: Union[ColorRGBA, Tuple[int, ...]]) -> None:
        self._check(x, y)
        self._pixels[y, x] = as_rgba(color).to_array()

    def column(self, x: int) -> NDArray:
        """Writable ``(height, 4)`` view over column ``x``."""
        if not 0 <= x < self.width:
            raise OutOfBoundsError(x, 0, self.width, self.height)
        return self._pixels[:, x, :]

    def fill(self, color: Union[ColorRGBA, Tuple[int, ...]]) -> None:
        self._pixels[...] = as_rgba(color).to_array()

    # ------------------ CONVERSIONS ------------------
    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._pixels.copy())

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self._pixels))

    def tobytes(self) -> bytes:
        return self._pixels.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(np.array_equal(self._pixels, other._pixels))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
