from .buffer import PixelBuffer
from .parallel import ColumnJob, ParallelRasterizer

__all__ = ["PixelBuffer", "ParallelRasterizer", "ColumnJob"]
