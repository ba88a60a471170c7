from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from ..colors.compositing import np_composite_over
from ..colors.rgb import ColorRGBA, as_rgba
from ..raster.buffer import PixelBuffer
from ..raster.parallel import ParallelRasterizer
from ..types.geometry import PointLike, as_point
from .distance import max_corner_distance, np_column_distances
from .gradient_table import GradientTable

logger = logging.getLogger(__name__)

ColorInput = Union[ColorRGBA, Tuple[int, ...]]


def draw_radial_gradient(
    buffer: PixelBuffer,
    center: PointLike,
    from_color: ColorInput,
    to_color: ColorInput,
    *,
    rasterizer: Optional[ParallelRasterizer] = None,
) -> None:
    """
    Paint a radial gradient over ``buffer`` in place.

    The ramp runs from ``from_color`` at ``center`` to ``to_color`` at the
    farthest image corner. Each pixel's gradient color is composited over the
    pixel already in the buffer with the "over" operator, so a transparent
    ``to_color`` fades the gradient out into the existing content.

    Columns are rendered concurrently; each job reads and writes only its own
    column view.

    Args:
        buffer: Target buffer, mutated in place
        center: Gradient origin in pixel coordinates
        from_color: Color at the center
        to_color: Color at the farthest corner
        rasterizer: Executor to use; a default-sized pool when omitted

    Raises:
        WorkerFailureError: If rendering a column failed.

    Notes:
        A single-pixel buffer is set to ``from_color`` directly.
    """
    center = as_point(center)
    from_color = as_rgba(from_color)
    to_color = as_rgba(to_color)

    domain_radius = max_corner_distance(buffer.width, buffer.height, center)
    if buffer.width * buffer.height == 1 or domain_radius == 0:
        buffer.fill(from_color)
        return

    table = GradientTable.build(from_color, to_color, domain_radius)
    if rasterizer is None:
        rasterizer = ParallelRasterizer()

    height = buffer.height

    def paint_column(x: int) -> None:
        column = buffer.column(x)
        radii = np_column_distances(x, height, center)
        column[...] = np_composite_over(column, table.np_colors_at(radii))

    logger.debug(
        "radial gradient %dx%d center=(%g, %g) domain_radius=%.3f workers=%d",
        buffer.width, buffer.height, center.x, center.y, domain_radius, rasterizer.workers,
    )
    rasterizer.render(buffer.width, paint_column)
    logger.debug("radial gradient %dx%d done", buffer.width, buffer.height)


def radial_gradient(
    width: int,
    height: int,
    center: PointLike,
    from_color: ColorInput,
    to_color: ColorInput,
    base: Optional[PixelBuffer] = None,
    workers: Optional[int] = None,
) -> PixelBuffer:
    """
    Render a radial gradient into a new buffer.

    Args:
        width: Width of the output buffer
        height: Height of the output buffer
        center: Gradient origin
        from_color: Inner color
        to_color: Outer color
        base: Optional buffer to composite onto; copied, never modified
        workers: Worker pool size, defaults to the configured count

    Returns:
        New :class:`PixelBuffer` of size ``width x height``
    """
    if base is not None:
        if base.size != (width, height):
            raise ValueError(f"`base` size {base.size} does not match ({width}, {height})")
        target = base.copy()
    else:
        target = PixelBuffer.new(width, height)

    draw_radial_gradient(
        target, center, from_color, to_color,
        rasterizer=ParallelRasterizer(workers),
    )
    return target
