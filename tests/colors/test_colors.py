import numpy as np
import pytest
from rasterkit.colors.rgb import ColorRGB, ColorRGBA, TRANSPARENT, as_rgba


def test_rgba_channels():
    color = ColorRGBA((10, 20, 30, 40))
    assert color.value == (10, 20, 30, 40)
    assert (color.r, color.g, color.b, color.a) == (10, 20, 30, 40)
    assert color.alpha == 40
    assert color.has_alpha


def test_values_are_clamped():
    color = ColorRGBA((-5, 300, 128, 999))
    assert color.value == (0, 255, 128, 255)


def test_numpy_input():
    color = ColorRGBA(np.array([1, 2, 3, 4], dtype=np.uint8))
    assert color.value == (1, 2, 3, 4)
    assert all(isinstance(c, int) for c in color.value)


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGBA((1, 2, 3))
    with pytest.raises(ValueError):
        ColorRGBA(np.zeros(3, dtype=np.uint8))


def test_non_numeric_channel():
    with pytest.raises(TypeError):
        ColorRGBA((1, 2, "3", 4))


def test_immutable():
    color = ColorRGBA((1, 2, 3, 4))
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0, 0)


def test_with_alpha():
    color = ColorRGBA((255, 0, 0, 255))
    half = color.with_alpha(128)
    assert half.value == (255, 0, 0, 128)
    assert color.value == (255, 0, 0, 255)
    assert color.with_alpha(1000).alpha == 255
    assert color.is_opaque
    assert TRANSPARENT.is_transparent


def test_rgb_promotes_to_opaque_rgba():
    rgba = ColorRGB((1, 2, 3)).with_alpha()
    assert isinstance(rgba, ColorRGBA)
    assert rgba.value == (1, 2, 3, 255)


def test_as_rgba():
    assert as_rgba((1, 2, 3)).value == (1, 2, 3, 255)
    assert as_rgba((1, 2, 3, 4)).value == (1, 2, 3, 4)
    same = ColorRGBA((9, 9, 9, 9))
    assert as_rgba(same) is same


def test_equality_and_hash():
    a = ColorRGBA((1, 2, 3, 4))
    b = ColorRGBA((1, 2, 3, 4))
    assert a == b
    assert a == (1, 2, 3, 4)
    assert hash(a) == hash(b)
    assert a != ColorRGBA((1, 2, 3, 5))
    assert list(a) == [1, 2, 3, 4]
    assert np.array_equal(a.to_array(), np.array([1, 2, 3, 4], dtype=np.uint8))


def test_hash_matches_equal_tuple():
    color = ColorRGBA((1, 2, 3, 4))
    assert hash(color) == hash((1, 2, 3, 4))
    assert (1, 2, 3, 4) in {color}
    assert {(1, 2, 3, 4): "x"}[color] == "x"


def test_public_names():
    import rasterkit.colors as colors

    assert set(colors.__all__) == {
        "ColorBase", "ColorRGB", "ColorRGBA", "RGB", "RGBA", "TRANSPARENT", "as_rgba",
        "hex_to_rgba", "rgba_to_hex",
        "composite_over", "composite_straight", "np_composite_over", "np_composite_straight",
    }
    assert all(hasattr(colors, name) for name in colors.__all__)
