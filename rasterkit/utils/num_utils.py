import math

import numpy as np


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def np_round_half_away(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`round_half_away`; returns float64 holding integral values."""
    values = np.asarray(values, dtype=np.float64)
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def to_channel(value: float) -> int:
    """Round a real channel value and clamp it into ``[0, 255]``."""
    return max(0, min(255, round_half_away(value)))


def np_to_channels(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`to_channel`, returning ``uint8``."""
    return np.clip(np_round_half_away(values), 0, 255).astype(np.uint8)
