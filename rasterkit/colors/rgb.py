from typing import ClassVar, Tuple
from .color_base import ColorBase, WithAlpha


class ColorRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    def with_alpha(self, alpha: int = 255) -> "ColorRGBA":
        """Promote to RGBA with the given alpha (opaque by default)."""
        return ColorRGBA(self.value + (max(0, min(int(alpha), 255)),))


class ColorRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    @property
    def r(self) -> int:
        return self.value[0]

    @property
    def g(self) -> int:
        return self.value[1]

    @property
    def b(self) -> int:
        return self.value[2]

    @property
    def a(self) -> int:
        return self.value[3]


RGB = ColorRGB
RGBA = ColorRGBA

TRANSPARENT = ColorRGBA(ColorRGBA.null_value)


def as_rgba(color) -> ColorRGBA:
    """Coerce a color instance or a 3/4-tuple to :class:`ColorRGBA`."""
    if isinstance(color, ColorRGBA):
        return color
    if isinstance(color, ColorRGB):
        return color.with_alpha()
    values = tuple(color)
    if len(values) == 3:
        return ColorRGB(values).with_alpha()
    return ColorRGBA(values)
