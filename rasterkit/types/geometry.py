from __future__ import annotations
from typing import NamedTuple, Tuple, Union


class Point(NamedTuple):
    """Immutable 2-D coordinate in pixel space."""

    x: float
    y: float


PointLike = Union[Point, Tuple[float, float]]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))
