"""Hex color string parsing."""

from __future__ import annotations

import string

from ..errors import InvalidFormatError
from .rgb import ColorRGBA

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgba(hex_code: str) -> ColorRGBA:
    """
    Parse ``#rrggbb`` or ``#rgb`` into an opaque :class:`ColorRGBA`.

    Digits are case-insensitive. The short form repeats each digit, so ``#f80``
    is ``#ff8800``.

    Raises:
        InvalidFormatError: On a missing ``#``, a wrong length or a non-hex digit.
    """
    if not isinstance(hex_code, str) or not hex_code.startswith("#"):
        raise InvalidFormatError(f"hex color must start with '#': {hex_code!r}")

    digits = hex_code[1:]
    if not digits or any(d not in _HEX_DIGITS for d in digits):
        raise InvalidFormatError(f"invalid hex digits in {hex_code!r}")

    if len(digits) == 6:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    elif len(digits) == 3:
        r, g, b = (int(d, 16) * 17 for d in digits)
    else:
        raise InvalidFormatError(f"hex color must have 3 or 6 digits: {hex_code!r}")

    return ColorRGBA((r, g, b, 255))


def rgba_to_hex(color: ColorRGBA, include_alpha: bool = False) -> str:
    """Format a color as ``#rrggbb`` (or ``#rrggbbaa``), lowercase."""
    channels = color.value if include_alpha else color.value[:3]
    return "#" + "".join(f"{c:02x}" for c in channels)
