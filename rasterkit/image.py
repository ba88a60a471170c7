"""
Image Operations
================

Whole-buffer operations built on :class:`~rasterkit.raster.PixelBuffer`:
creation, flat and axis-gradient fills, layer pasting, text, decoding,
resizing and PNG encoding. Decoding, encoding, glyph rasterization and
resampling are delegated to Pillow.

Layers are always combined with the straight-alpha Porter-Duff "over"
operator (:func:`~rasterkit.colors.np_composite_straight`).
"""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image, ImageDraw, ImageFont

from .colors.compositing import np_composite_straight
from .colors.rgb import ColorRGBA, as_rgba
from .config import DEFAULT_RESAMPLE
from .errors import InvalidFormatError
from .gradients.gradient_table import GradientTable
from .raster.buffer import PixelBuffer
from .types.orientation import GradientOrientation, Resample
from .utils.default import value_or_default
from .utils.num_utils import np_to_channels

logger = logging.getLogger(__name__)

ColorInput = Union[ColorRGBA, Tuple[int, ...]]
PathLike = Union[str, os.PathLike]

_PIL_RESAMPLE = {
    Resample.NEAREST: Image.Resampling.NEAREST,
    Resample.BILINEAR: Image.Resampling.BILINEAR,
    Resample.BICUBIC: Image.Resampling.BICUBIC,
    Resample.LANCZOS: Image.Resampling.LANCZOS,
}


def new(width: int, height: int) -> PixelBuffer:
    """Transparent ``width x height`` buffer."""
    return PixelBuffer.new(width, height)


def fill_color(buffer: PixelBuffer, color: ColorInput) -> None:
    """Overwrite every pixel with ``color``."""
    buffer.fill(color)


def fill_gradient(
    buffer: PixelBuffer,
    start: ColorInput,
    end: ColorInput,
    orientation: Union[GradientOrientation, str] = GradientOrientation.HORIZONTAL,
) -> None:
    """
    Overwrite the buffer with a two-color ramp along one axis.

    ``HORIZONTAL`` varies along x (left to right), ``VERTICAL`` along y (top to
    bottom). Step ``i`` of an axis of length ``n`` gets
    ``start + (end - start) * i / n``, so ``end`` itself is only approached.
    """
    orientation = GradientOrientation(orientation)
    extent = buffer.width if orientation is GradientOrientation.HORIZONTAL else buffer.height

    table = GradientTable.build(start, end, extent)
    steps = table.np_colors_at(np.arange(extent, dtype=np.float64))

    if orientation is GradientOrientation.HORIZONTAL:
        buffer.pixels[...] = steps[None, :, :]
    else:
        buffer.pixels[...] = steps[:, None, :]


def _clip(buffer: PixelBuffer, width: int, height: int, x: int, y: int):
    """Intersect a ``width x height`` layer at ``(x, y)`` with the buffer extent."""
    dst_x0, dst_y0 = max(x, 0), max(y, 0)
    dst_x1, dst_y1 = min(x + width, buffer.width), min(y + height, buffer.height)
    if dst_x0 >= dst_x1 or dst_y0 >= dst_y1:
        return None
    dst = (slice(dst_y0, dst_y1), slice(dst_x0, dst_x1))
    src = (slice(dst_y0 - y, dst_y1 - y), slice(dst_x0 - x, dst_x1 - x))
    return dst, src


def paste(buffer: PixelBuffer, overlay: PixelBuffer, x: int = 0, y: int = 0) -> None:
    """
    Composite ``overlay`` onto ``buffer`` with its top-left corner at ``(x, y)``.

    Parts of the overlay outside the buffer are ignored.
    """
    regions = _clip(buffer, overlay.width, overlay.height, x, y)
    if regions is None:
        return
    dst, src = regions
    target = buffer.pixels[dst]
    target[...] = np_composite_straight(target, overlay.pixels[src])


def fill_mask(buffer: PixelBuffer, mask: NDArray, color: ColorInput, x: int = 0, y: int = 0) -> None:
    """
    Composite ``color`` through an 8-bit coverage mask.

    Args:
        buffer: Target buffer
        mask: ``(h, w)`` uint8 coverage, 255 meaning fully covered
        color: Ink color; its alpha is scaled by the coverage
        x: Horizontal offset of the mask
        y: Vertical offset of the mask
    """
    mask = np.asarray(mask)
    if mask.ndim != 2:
        raise ValueError(f"mask must be 2-dimensional, got shape {mask.shape}")
    regions = _clip(buffer, mask.shape[1], mask.shape[0], x, y)
    if regions is None:
        return
    dst, src = regions
    ink = as_rgba(color)

    coverage = mask[src].astype(np.float64)
    layer = np.empty(coverage.shape + (4,), dtype=np.uint8)
    layer[..., :3] = ink.value[:3]
    layer[..., 3] = np_to_channels(coverage * ink.a / 255)

    target = buffer.pixels[dst]
    target[...] = np_composite_straight(target, layer)


def write(
    buffer: PixelBuffer,
    text: str,
    color: ColorInput,
    face: ImageFont.FreeTypeFont,
    x: int,
    y: int,
) -> None:
    """
    Draw ``text`` with its top-left corner at ``(x, y)``.

    The baseline sits at ``y + ascent`` of ``face``.
    """
    ascent, _ = face.getmetrics()
    mask = Image.new("L", buffer.size, 0)
    ImageDraw.Draw(mask).text((x, y + ascent), text, fill=255, font=face, anchor="ls")
    fill_mask(buffer, np.asarray(mask), color)


# ------------------ DECODE / ENCODE ------------------
def open_image(stream: BinaryIO) -> PixelBuffer:
    """
    Decode any Pillow-supported image (PNG, JPEG, WEBP, ...) into an RGBA buffer.

    Raises:
        InvalidFormatError: If the data is not a recognizable image or is
            truncated or corrupt.
    """
    try:
        with Image.open(stream) as image:
            image.load()
            return PixelBuffer.from_image(image)
    except (OSError, SyntaxError) as exc:
        # UnidentifiedImageError is an OSError; truncated data fails in load()
        raise InvalidFormatError(f"cannot decode image: {exc}") from exc


def open_image_by_path(path: PathLike) -> PixelBuffer:
    with open(path, "rb") as fh:
        return open_image(fh)


def open_image_by_bytes(data: bytes) -> PixelBuffer:
    return open_image(io.BytesIO(data))


def save(buffer: PixelBuffer, path: PathLike) -> None:
    """Encode ``buffer`` as PNG at ``path``."""
    buffer.to_image().save(path, format="PNG")
    logger.debug("saved %dx%d PNG to %s", buffer.width, buffer.height, path)


def save_to_stream(buffer: PixelBuffer, stream: BinaryIO) -> None:
    buffer.to_image().save(stream, format="PNG")


# ------------------ RESIZE ------------------
def fit_size(width: int, height: int, max_width: float, max_height: float) -> Tuple[int, int]:
    """Largest size with the aspect ratio of ``width x height`` fitting in the box."""
    if max_width <= 0 or max_height <= 0:
        raise ValueError(f"target box must be positive, got {max_width}x{max_height}")
    ratio = min(max_width / width, max_height / height)
    return max(1, int(width * ratio)), max(1, int(height * ratio))


def resize(
    buffer: PixelBuffer,
    width: float,
    height: float,
    resample: Optional[Union[Resample, str]] = None,
) -> PixelBuffer:
    """
    Scale ``buffer`` to fit inside ``width x height``, keeping its aspect ratio.

    Args:
        buffer: Source buffer, left untouched
        width: Maximum output width
        height: Maximum output height
        resample: Filter name, Lanczos by default

    Returns:
        New resized buffer
    """
    resample = Resample(value_or_default(resample, DEFAULT_RESAMPLE))
    size = fit_size(buffer.width, buffer.height, width, height)
    resized = buffer.to_image().resize(size, _PIL_RESAMPLE[resample])
    return PixelBuffer.from_image(resized)
