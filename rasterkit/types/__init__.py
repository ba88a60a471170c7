from .color_types import CHANNEL_MAX, RGBA_CHANNELS, IntVector, Scalar, ScalarVector
from .geometry import Point, PointLike, as_point
from .orientation import GradientOrientation, Resample

__all__ = [
    "CHANNEL_MAX",
    "RGBA_CHANNELS",
    "IntVector",
    "Scalar",
    "ScalarVector",
    "Point",
    "PointLike",
    "as_point",
    "GradientOrientation",
    "Resample",
]
