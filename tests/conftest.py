import os
import sys

import numpy as np
import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from rasterkit.raster.buffer import PixelBuffer


@pytest.fixture
def white_buffer():
    return PixelBuffer.new(4, 4, fill=(255, 255, 255, 255))


@pytest.fixture
def noise_buffer():
    """Deterministic random RGBA contents."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(9, 13, 4), dtype=np.uint8))
