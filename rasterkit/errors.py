"""Exception hierarchy shared by every rasterkit module."""

from __future__ import annotations


class RasterkitError(Exception):
    """Base class for all errors raised by rasterkit."""


class InvalidDomainError(RasterkitError, ValueError):
    """A gradient table was built over a non-positive radius."""

    def __init__(self, domain_radius: float) -> None:
        self.domain_radius = domain_radius
        super().__init__(f"gradient domain radius must be > 0, got {domain_radius!r}")


class OutOfBoundsError(RasterkitError, IndexError):
    """A pixel coordinate lies outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"pixel ({x}, {y}) outside buffer of size {width}x{height}")


class WorkerFailureError(RasterkitError, RuntimeError):
    """First failure raised by a column job, re-raised after all workers drained."""

    def __init__(self, column: int, cause: BaseException) -> None:
        self.column = column
        super().__init__(f"column {column} failed: {cause!r}")


class InvalidFormatError(RasterkitError, ValueError):
    """Malformed color string or unreadable font/image data."""
