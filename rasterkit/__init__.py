"""
rasterkit - 2-D Raster Image Toolkit
====================================

RGBA pixel buffers with flat and axis-gradient fills, text, path filling,
compositing, resizing and a multi-threaded radial gradient renderer.

Quick Start
-----------
>>> from rasterkit import PixelBuffer, Point, hex_to_rgba, draw_radial_gradient
>>>
>>> buf = PixelBuffer.new(256, 256, fill=hex_to_rgba("#ffffff"))
>>> draw_radial_gradient(buf, Point(128, 128), (255, 0, 0, 255), (0, 0, 255, 0))
>>> buf.get(128, 128)
ColorRGBA((255, 0, 0, 255))

Modules
-------
- colors: immutable RGBA colors, hex parsing, compositing operators
- gradients: gradient table, distance field, radial renderer
- raster: pixel buffer and the column-parallel rasterizer
- image: fills, paste, text, decode/encode, resize
- font / vector: typeface wrapper and polygon paths
"""

import logging

from .errors import (
    RasterkitError,
    InvalidDomainError,
    OutOfBoundsError,
    WorkerFailureError,
    InvalidFormatError,
)
from .types import Point, GradientOrientation, Resample
from .colors import (
    ColorBase,
    ColorRGB,
    ColorRGBA,
    TRANSPARENT,
    hex_to_rgba,
    rgba_to_hex,
    composite_over,
    composite_straight,
    np_composite_over,
    np_composite_straight,
)
from .raster import PixelBuffer, ParallelRasterizer
from .gradients import (
    GradientTable,
    distance,
    max_corner_distance,
    draw_radial_gradient,
    radial_gradient,
)
from .image import (
    new,
    fill_color,
    fill_gradient,
    paste,
    write,
    open_image,
    open_image_by_path,
    open_image_by_bytes,
    resize,
    save,
    save_to_stream,
)
from .font import RawFont
from .vector import Path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # errors
    "RasterkitError",
    "InvalidDomainError",
    "OutOfBoundsError",
    "WorkerFailureError",
    "InvalidFormatError",

    # types
    "Point",
    "GradientOrientation",
    "Resample",

    # colors
    "ColorBase",
    "ColorRGB",
    "ColorRGBA",
    "TRANSPARENT",
    "hex_to_rgba",
    "rgba_to_hex",
    "composite_over",
    "composite_straight",
    "np_composite_over",
    "np_composite_straight",

    # raster
    "PixelBuffer",
    "ParallelRasterizer",

    # gradients
    "GradientTable",
    "distance",
    "max_corner_distance",
    "draw_radial_gradient",
    "radial_gradient",

    # image operations
    "new",
    "fill_color",
    "fill_gradient",
    "paste",
    "write",
    "open_image",
    "open_image_by_path",
    "open_image_by_bytes",
    "resize",
    "save",
    "save_to_stream",

    # fonts and paths
    "RawFont",
    "Path",

    # Version
    "__version__",
]
