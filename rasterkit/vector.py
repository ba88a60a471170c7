from __future__ import annotations

from typing import List, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from .colors.rgb import ColorRGBA
from .image import fill_mask
from .raster.buffer import PixelBuffer
from .utils.num_utils import np_to_channels

# coverage samples per pixel along each axis
SUPERSAMPLE = 4


def _signed_area(points: List[Tuple[float, float]]) -> float:
    """Shoelace area of the implicitly closed polygon ``points``."""
    xs = np.array([p[0] for p in points], dtype=np.float64)
    ys = np.array([p[1] for p in points], dtype=np.float64)
    return 0.5 * float(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1)))


class Path:
    """
    Polygon builder over a ``width x height`` canvas.

    ``move_to`` starts a new sub-path, ``line_to`` extends the current one; each
    sub-path is closed implicitly and filled when the path is drawn. Pixel
    ``(i, j)`` spans ``[i, i + 1] x [j, j + 1]`` and is covered in proportion to
    how many of its ``SUPERSAMPLE x SUPERSAMPLE`` sample centers fall inside
    the union of the sub-paths, so edges are anti-aliased. Sub-paths that
    enclose no area are skipped. Drawing resets the path so it can be reused.

    >>> Path(10, 10).move_to(0, 0).line_to(9, 0).line_to(0, 9).draw(buf, (255, 0, 0, 255))
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"path canvas must be positive, got {width}x{height}")
        self._size = (width, height)
        self._subpaths: List[List[Tuple[float, float]]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def subpaths(self) -> List[List[Tuple[float, float]]]:
        return [list(points) for points in self._subpaths]

    def move_to(self, x: float, y: float) -> "Path":
        self._subpaths.append([(float(x), float(y))])
        return self

    def line_to(self, x: float, y: float) -> "Path":
        if not self._subpaths:
            # a leading line_to starts at the origin
            self._subpaths.append([(0.0, 0.0)])
        self._subpaths[-1].append((float(x), float(y)))
        return self

    def reset(self) -> None:
        self._subpaths.clear()

    def coverage(self) -> np.ndarray:
        """Rasterize the sub-paths into a ``(height, width)`` uint8 coverage mask."""
        width, height = self._size
        s = SUPERSAMPLE
        # Pillow fills closed polygons, edges included, at integer lattice points.
        # At scale 2s the vertices sit on even points and the odd points are the
        # centers of an s x s sample grid, which never lie on grid-aligned edges.
        scale = 2 * s
        canvas = Image.new("L", (width * scale, height * scale), 0)
        draw = ImageDraw.Draw(canvas)
        for points in self._subpaths:
            if len(points) < 3 or _signed_area(points) == 0:
                continue
            draw.polygon([(x * scale, y * scale) for x, y in points], fill=255)

        samples = np.asarray(canvas)[1::2, 1::2] == 255
        share = samples.reshape(height, s, width, s).mean(axis=(1, 3))
        return np_to_channels(share * 255)

    def draw(
        self,
        on: PixelBuffer,
        color: Union[ColorRGBA, Tuple[int, ...]],
        x: int = 0,
        y: int = 0,
    ) -> "Path":
        """Fill the path with ``color`` onto ``on`` at offset ``(x, y)``, then reset."""
        if self._subpaths:
            fill_mask(on, self.coverage(), color, x, y)
        self.reset()
        return self
