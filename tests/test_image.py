import io

import numpy as np
import pytest
from PIL import Image, features
from rasterkit import image as rk_image
from rasterkit.errors import InvalidFormatError
from rasterkit.font import RawFont
from rasterkit.raster.buffer import PixelBuffer
from rasterkit.types.orientation import GradientOrientation, Resample

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


def test_new_and_fill_color():
    buf = rk_image.new(3, 2)
    rk_image.fill_color(buf, (1, 2, 3, 4))
    assert np.all(buf.pixels == np.array([1, 2, 3, 4]))


def test_fill_gradient_horizontal():
    buf = rk_image.new(4, 2)
    rk_image.fill_gradient(buf, (0, 0, 0, 255), (255, 255, 255, 255), GradientOrientation.HORIZONTAL)
    # steps at 0, 63.75, 127.5, 191.25
    expected_row = np.array([
        (0, 0, 0, 255),
        (64, 64, 64, 255),
        (128, 128, 128, 255),
        (191, 191, 191, 255),
    ], dtype=np.uint8)
    assert np.array_equal(buf.pixels[0], expected_row)
    assert np.array_equal(buf.pixels[1], expected_row)


def test_fill_gradient_vertical():
    buf = rk_image.new(3, 2)
    rk_image.fill_gradient(buf, (0, 0, 0, 0), (100, 50, 0, 200), "vertical")
    assert np.all(buf.pixels[0] == np.array([0, 0, 0, 0]))
    assert np.all(buf.pixels[1] == np.array([50, 25, 0, 100]))


def test_fill_gradient_overwrites():
    buf = PixelBuffer.new(2, 2, fill=WHITE)
    rk_image.fill_gradient(buf, (0, 0, 0, 0), (0, 0, 0, 0))
    assert not buf.pixels.any()


def test_paste_clips_to_buffer():
    buf = PixelBuffer.new(4, 4, fill=WHITE)
    overlay = PixelBuffer.new(2, 2, fill=RED)
    rk_image.paste(buf, overlay, 3, 3)
    assert buf.get(3, 3).value == RED
    assert buf.get(2, 2).value == WHITE
    assert (buf.pixels[..., 1] == 0).sum() == 1


def test_paste_negative_offset():
    buf = PixelBuffer.new(4, 4, fill=WHITE)
    overlay = PixelBuffer.new(2, 2)
    overlay.set(1, 1, RED)
    rk_image.paste(buf, overlay, -1, -1)
    assert buf.get(0, 0).value == RED
    assert (buf.pixels[..., 1] == 0).sum() == 1


def test_paste_outside_is_noop():
    buf = PixelBuffer.new(4, 4, fill=WHITE)
    rk_image.paste(buf, PixelBuffer.new(2, 2, fill=RED), 10, 0)
    assert np.all(buf.pixels == 255)


def test_paste_onto_transparent_keeps_color():
    buf = PixelBuffer.new(2, 2)
    rk_image.paste(buf, PixelBuffer.new(2, 2, fill=(200, 100, 50, 128)))
    assert buf.get(1, 0).value == (200, 100, 50, 128)


def test_fill_mask_partial_coverage():
    buf = PixelBuffer.new(2, 1, fill=WHITE)
    mask = np.array([[255, 128]], dtype=np.uint8)
    rk_image.fill_mask(buf, mask, (0, 0, 0, 255))
    assert buf.get(0, 0).value == (0, 0, 0, 255)
    assert buf.get(1, 0).value == (127, 127, 127, 255)


def test_fill_mask_rejects_3d():
    with pytest.raises(ValueError):
        rk_image.fill_mask(PixelBuffer.new(2, 2), np.zeros((2, 2, 1), dtype=np.uint8), RED)


def test_png_stream_round_trip():
    rng = np.random.default_rng(7)
    buf = PixelBuffer(rng.integers(0, 256, size=(5, 6, 4), dtype=np.uint8))
    stream = io.BytesIO()
    rk_image.save_to_stream(buf, stream)
    assert stream.getvalue().startswith(b"\x89PNG")
    assert rk_image.open_image_by_bytes(stream.getvalue()) == buf


def test_save_and_open_by_path(tmp_path):
    buf = PixelBuffer.new(3, 3, fill=(9, 8, 7, 255))
    path = tmp_path / "out.png"
    rk_image.save(buf, path)
    assert rk_image.open_image_by_path(path) == buf


def test_open_converts_to_rgba():
    stream = io.BytesIO()
    Image.new("L", (2, 3), 100).save(stream, format="PNG")
    stream.seek(0)
    buf = rk_image.open_image(stream)
    assert buf.size == (2, 3)
    assert buf.get(0, 0).value == (100, 100, 100, 255)


def test_open_garbage():
    with pytest.raises(InvalidFormatError):
        rk_image.open_image_by_bytes(b"definitely not an image")


def test_open_truncated_png():
    rng = np.random.default_rng(3)
    stream = io.BytesIO()
    rk_image.save_to_stream(PixelBuffer(rng.integers(0, 256, size=(16, 16, 4), dtype=np.uint8)), stream)
    with pytest.raises(InvalidFormatError):
        rk_image.open_image_by_bytes(stream.getvalue()[:60])


def test_open_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        rk_image.open_image_by_path(tmp_path / "missing.png")


def test_fit_size():
    assert rk_image.fit_size(100, 50, 50, 50) == (50, 25)
    assert rk_image.fit_size(100, 50, 400, 100) == (200, 100)
    assert rk_image.fit_size(1000, 1, 10, 10) == (10, 1)
    with pytest.raises(ValueError):
        rk_image.fit_size(10, 10, 0, 5)


def test_resize_keeps_aspect_ratio():
    buf = PixelBuffer.new(100, 50, fill=RED)
    small = rk_image.resize(buf, 50, 50)
    assert small.size == (50, 25)
    # Lanczos may drift by one unit on flat areas
    assert np.abs(small.pixels.astype(int) - np.array(RED)).max() <= 1
    assert buf.size == (100, 50)


def test_resize_with_named_filter():
    buf = PixelBuffer.new(4, 4, fill=(0, 255, 0, 255))
    big = rk_image.resize(buf, 8, 8, resample=Resample.NEAREST)
    assert big.size == (8, 8)
    assert np.all(big.pixels == np.array([0, 255, 0, 255]))


@pytest.mark.skipif(not features.check("freetype2"), reason="Pillow built without FreeType")
def test_write_text():
    buf = PixelBuffer.new(60, 30, fill=WHITE)
    face = RawFont.default().new_face(20)
    rk_image.write(buf, "Hi", (0, 0, 0, 255), face, 2, 2)

    ink = buf.pixels[..., 0] < 128
    assert ink.any()
    ys, xs = np.nonzero(ink)
    ascent, _ = face.getmetrics()
    assert ys.min() >= 2
    assert ys.max() <= 2 + ascent + 1
    assert xs.max() < 40
    assert buf.get(59, 29).value == WHITE
