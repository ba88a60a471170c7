"""TrueType/OpenType fonts: faces, text measurement and fitting."""

from __future__ import annotations

import io
import logging
from typing import Callable, Tuple

from PIL import ImageFont

from .errors import InvalidFormatError
from .utils.num_utils import round_half_away

logger = logging.getLogger(__name__)

FaceLoader = Callable[[float], ImageFont.FreeTypeFont]


class RawFont:
    """
    A parsed font that produces sized faces on demand.

    Sizes are in pixels, which equals points at 72 DPI.
    """

    def __init__(self, loader: FaceLoader) -> None:
        self._loader = loader

    @classmethod
    def open(cls, font_bytes: bytes) -> "RawFont":
        """
        Parse TrueType/OpenType font data.

        Raises:
            InvalidFormatError: If the data is not a readable font.
        """
        try:
            ImageFont.truetype(io.BytesIO(font_bytes), size=12)
        except OSError as exc:
            raise InvalidFormatError(f"cannot parse font: {exc}") from exc

        def loader(size: float) -> ImageFont.FreeTypeFont:
            return ImageFont.truetype(io.BytesIO(font_bytes), size=size)

        return cls(loader)

    @classmethod
    def default(cls) -> "RawFont":
        """Pillow's bundled scalable font (requires FreeType support)."""
        probe = ImageFont.load_default(size=12)
        if not isinstance(probe, ImageFont.FreeTypeFont):
            raise InvalidFormatError("Pillow was built without FreeType; no scalable default font")
        return cls(lambda size: ImageFont.load_default(size=size))  # type: ignore[return-value]

    def new_face(self, size: float) -> ImageFont.FreeTypeFont:
        if size <= 0:
            raise ValueError(f"font size must be > 0, got {size}")
        return self._loader(size)

    def text_width(self, text: str, size: float) -> int:
        """Advance width of ``text``, rounded half away from zero to whole pixels."""
        return round_half_away(self.new_face(size).getlength(text))

    def text_height(self, size: float) -> int:
        """Ascent of a face of ``size``."""
        ascent, _ = self.new_face(size).getmetrics()
        return ascent

    def text_size(self, text: str, size: float) -> Tuple[int, int]:
        return self.text_width(text, size), self.text_height(size)

    def fit_text(self, text: str, size: float, max_width: int) -> Tuple[ImageFont.FreeTypeFont, int]:
        """
        Shrink ``size`` one unit at a time until ``text`` is narrower than ``max_width``.

        Stops at size 1 even if the text still does not fit.

        Returns:
            The face at the final size and the text width at that size.
        """
        width = self.text_width(text, size)
        while width >= max_width and size > 1:
            size = max(1, size - 1)
            width = self.text_width(text, size)
        logger.debug("fit %r into %dpx at size %s (width %d)", text, max_width, size, width)
        return self.new_face(size), width
