from .distance import distance, max_corner_distance, np_column_distances
from .gradient_table import GradientTable
from .radial import draw_radial_gradient, radial_gradient

__all__ = [
    "distance",
    "max_corner_distance",
    "np_column_distances",
    "GradientTable",
    "draw_radial_gradient",
    "radial_gradient",
]
