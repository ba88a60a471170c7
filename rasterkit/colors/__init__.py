"""
rasterkit Color Classes
=======================

Immutable 8-bit colors in straight (non-premultiplied) alpha, hex parsing and
the compositing operators used throughout the rasterizer.

Usage
-----
>>> from rasterkit.colors import ColorRGBA, hex_to_rgba, composite_over
>>>
>>> red = ColorRGBA((255, 0, 0, 255))
>>> print(red.alpha)  # 255
>>> half = red.with_alpha(128)
>>> composite_over(hex_to_rgba("#ffffff"), half)
ColorRGBA((255, 127, 127, 255))

Notes
-----
- Channel values are clamped to [0, 255] during initialization
- Instances are frozen after ``__init__``
- Vectorized ``np_*`` operators take ``(..., 4)`` uint8 arrays
"""

from .color_base import ColorBase
from .rgb import RGB, RGBA, TRANSPARENT, ColorRGB, ColorRGBA, as_rgba
from .hex import hex_to_rgba, rgba_to_hex
from .compositing import (
    composite_over,
    composite_straight,
    np_composite_over,
    np_composite_straight,
)


__all__ = [
    "ColorBase",
    "ColorRGB",
    "ColorRGBA",
    "RGB",
    "RGBA",
    "TRANSPARENT",
    "as_rgba",
    "hex_to_rgba",
    "rgba_to_hex",
    "composite_over",
    "composite_straight",
    "np_composite_over",
    "np_composite_straight",
]
