"""
Straight-alpha compositing
==========================

Two "over" operators, each in a scalar form working on :class:`ColorRGBA` and a
vectorized form working on ``(..., 4)`` uint8 arrays. Both forms evaluate the
same float64 expressions in the same order, so a pixel composited through the
scalar path and through the array path ends up with the same bytes.

composite_over
    Background weighted by the foreground alpha only. Used by the gradient
    renderer, where the background alpha does not attenuate the blend.

        c = round((bg.c * (255 - fg.a) + fg.c * fg.a) / 255)
        a = round(255 - (255 - bg.a) * (255 - fg.a) / 255)

composite_straight
    Full Porter-Duff "over" for two layers with independent alpha, in unit
    alpha space. Used when pasting layers (images, text, paths).

        out_a = fa + ba * (1 - fa)
        c     = (fc * fa + bc * ba * (1 - fa)) / out_a

    Transparent over transparent (``out_a == 0``) yields ``(0, 0, 0, 0)``.

Rounding is half-away-from-zero throughout.
"""

from __future__ import annotations

import numpy as np
from numpy import ndarray

from ..utils.num_utils import np_to_channels, to_channel
from .rgb import TRANSPARENT, ColorRGBA, as_rgba


def composite_over(background: ColorRGBA, foreground: ColorRGBA) -> ColorRGBA:
    """Blend ``foreground`` onto ``background`` using the foreground alpha."""
    bg = as_rgba(background)
    fg = as_rgba(foreground)

    fa = fg.a
    if fa == 255:
        return fg

    inv = 255 - fa
    rgb = tuple(
        to_channel((b * inv + f * fa) / 255)
        for b, f in zip(bg.value[:3], fg.value[:3])
    )
    alpha = to_channel(255 - (255 - bg.a) * inv / 255)
    return ColorRGBA(rgb + (alpha,))


def composite_straight(background: ColorRGBA, foreground: ColorRGBA) -> ColorRGBA:
    """Porter-Duff "over" for two straight-alpha layers."""
    bg = as_rgba(background)
    fg = as_rgba(foreground)

    fa = fg.a / 255.0
    ba = bg.a / 255.0
    out_a = fa + ba * (1 - fa)
    if out_a == 0:
        return TRANSPARENT

    rgb = tuple(
        to_channel((f * fa + b * ba * (1 - fa)) / out_a)
        for b, f in zip(bg.value[:3], fg.value[:3])
    )
    return ColorRGBA(rgb + (to_channel(out_a * 255),))


def _as_pixel_arrays(background: ndarray, foreground: ndarray) -> tuple[ndarray, ndarray]:
    bg = np.asarray(background)
    fg = np.asarray(foreground)
    if bg.shape[-1] != 4 or fg.shape[-1] != 4:
        raise ValueError(
            f"expected RGBA arrays with last dimension 4, got {bg.shape} and {fg.shape}"
        )
    bg, fg = np.broadcast_arrays(bg.astype(np.int64), fg.astype(np.int64))
    return bg, fg


def np_composite_over(background: ndarray, foreground: ndarray) -> ndarray:
    """
    Vectorized :func:`composite_over`.

    Args:
        background: ``(..., 4)`` RGBA array.
        foreground: ``(..., 4)`` RGBA array, broadcastable against ``background``.

    Returns:
        New uint8 array with the broadcast shape.
    """
    bg, fg = _as_pixel_arrays(background, foreground)

    fa = fg[..., 3:4]
    inv = 255 - fa
    rgb = (bg[..., :3] * inv + fg[..., :3] * fa) / 255
    alpha = 255 - (255 - bg[..., 3:4]) * inv / 255
    blended = np_to_channels(np.concatenate([rgb, alpha], axis=-1))

    # opaque foreground overwrites without rounding
    return np.where(fa == 255, fg, blended).astype(np.uint8)


def np_composite_straight(background: ndarray, foreground: ndarray) -> ndarray:
    """Vectorized :func:`composite_straight`."""
    bg, fg = _as_pixel_arrays(background, foreground)

    fa = fg[..., 3:4] / 255.0
    ba = bg[..., 3:4] / 255.0
    out_a = fa + ba * (1 - fa)

    num = fg[..., :3] * fa + bg[..., :3] * ba * (1 - fa)
    rgb = np.divide(
        num,
        out_a,
        out=np.zeros(num.shape, dtype=np.float64),
        where=out_a != 0,
    )
    return np_to_channels(np.concatenate([rgb, out_a * 255], axis=-1))
