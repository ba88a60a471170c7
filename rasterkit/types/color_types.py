from __future__ import annotations
from typing import Tuple

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]

CHANNEL_MAX = 255
RGBA_CHANNELS = 4
