"""Tests for PNG decoding and colour normalization."""

import numpy as np
import pytest
from PIL import Image

from trimosaic.errors import (
    FileOpenError,
    ImageDecodeError,
    UnsupportedBitDepthError,
    UnsupportedColorEncodingError,
)
from trimosaic.image_processing.decoding import decode_png, load_png, read_png_header

from tests.conftest import QUAD_PIXELS, png_header, png_with_header


def test_read_header(quad_png):
    assert read_png_header(quad_png.read_bytes()) == (2, 2, 8, 2)


def test_rgb_png(quad_png):
    buffer = load_png(quad_png)
    assert (buffer.width, buffer.height) == (2, 2)
    assert buffer.data == QUAD_PIXELS.tobytes()


def test_rgba_drops_alpha(tmp_path):
    array = np.zeros((1, 2, 4), dtype=np.uint8)
    array[0, 0] = (10, 20, 30, 0)
    array[0, 1] = (40, 50, 60, 255)
    path = tmp_path / "rgba.png"
    Image.fromarray(array).save(path)

    buffer = load_png(path)
    assert buffer.data == bytes([10, 20, 30, 40, 50, 60])


def test_grayscale_is_replicated(tmp_path):
    path = tmp_path / "gray.png"
    Image.fromarray(np.array([[0, 128, 255]], dtype=np.uint8)).save(path)

    buffer = load_png(path)
    assert (buffer.width, buffer.height) == (3, 1)
    assert buffer.data == bytes([0, 0, 0, 128, 128, 128, 255, 255, 255])


def test_grayscale_alpha(tmp_path):
    path = tmp_path / "gray_alpha.png"
    image = Image.new("LA", (2, 1))
    image.putpixel((0, 0), (77, 0))
    image.putpixel((1, 0), (200, 255))
    image.save(path)

    buffer = load_png(path)
    assert buffer.data == bytes([77, 77, 77, 200, 200, 200])


def test_16_bit_png_rejected(tmp_path):
    path = tmp_path / "deep.png"
    Image.new("I;16", (2, 2)).save(path)
    assert read_png_header(path.read_bytes())[2] == 16

    with pytest.raises(UnsupportedBitDepthError):
        load_png(path)


@pytest.mark.parametrize("bit_depth", [1, 2, 4, 16])
def test_bit_depth_checked_from_header(bit_depth):
    with pytest.raises(UnsupportedBitDepthError):
        decode_png(png_header(4, 4, bit_depth, 2))


def test_palette_rejected():
    with pytest.raises(UnsupportedColorEncodingError):
        decode_png(png_header(4, 4, 8, 3))


def test_bit_depth_checked_before_color_type():
    with pytest.raises(UnsupportedBitDepthError):
        decode_png(png_header(4, 4, 4, 3))


def test_not_a_png(tmp_path):
    path = tmp_path / "image.bmp"
    Image.new("RGB", (2, 2)).save(path, format="BMP")
    with pytest.raises(ImageDecodeError):
        load_png(path)


def test_truncated_png(quad_png):
    data = quad_png.read_bytes()
    with pytest.raises(ImageDecodeError):
        decode_png(data[:40])


def test_missing_file(tmp_path):
    with pytest.raises(FileOpenError) as exc_info:
        load_png(tmp_path / "nope.png")
    assert str(exc_info.value).startswith("decode:")


def test_oversized_png_rejected(oversized_png):
    with pytest.raises(ImageDecodeError) as exc_info:
        load_png(oversized_png)
    assert str(exc_info.value).startswith("decode:")


def test_zero_size_png_reports_decode_stage():
    with pytest.raises(ImageDecodeError) as exc_info:
        decode_png(png_with_header(0, 0))
    assert str(exc_info.value).startswith("decode:")
