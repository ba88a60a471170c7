from __future__ import annotations

import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.geometry import PointLike, as_point


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two points."""
    a = as_point(a)
    b = as_point(b)
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def max_corner_distance(width: int, height: int, center: PointLike) -> float:
    """
    Longest distance from ``center`` to the four corners of a ``width x height`` image.

    Corners are taken at ``(0, 0)``, ``(width, 0)``, ``(0, height)`` and
    ``(width, height)``, so every pixel coordinate of the image lies within the
    returned radius.
    """
    center = as_point(center)
    return max(
        distance(center, (0.0, 0.0)),
        distance(center, (float(width), 0.0)),
        distance(center, (0.0, float(height))),
        distance(center, (float(width), float(height))),
    )


def np_column_distances(x: int, height: int, center: PointLike) -> NDArray:
    """
    Distances from ``center`` to the pixels ``(x, 0) .. (x, height - 1)``.

    Evaluates the same expression as :func:`distance` so scalar and vectorized
    results agree bit for bit.
    """
    center = as_point(center)
    dx = float(x) - center.x
    dy = np.arange(height, dtype=np.float64) - center.y
    return np.sqrt(dx * dx + dy * dy)
