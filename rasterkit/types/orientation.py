# No dependencies
from enum import Enum


class GradientOrientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Resample(str, Enum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"
