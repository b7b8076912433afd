"""Shared test fixtures."""

from __future__ import annotations

import struct
import zlib

import numpy as np
import pytest
from PIL import Image

from trimosaic.models import PixelBuffer


RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)

# Top-left red, top-right green, bottom-left blue, bottom-right white
QUAD_PIXELS = np.array(
    [
        [RED, GREEN],
        [BLUE, WHITE],
    ],
    dtype=np.uint8,
)


def png_chunk(kind: bytes, payload: bytes) -> bytes:
    body = kind + payload
    crc = struct.pack(">I", zlib.crc32(body) & 0xFFFFFFFF)
    return struct.pack(">I", len(payload)) + body + crc


def png_header(width: int, height: int, bit_depth: int, color_type: int) -> bytes:
    """PNG signature and IHDR chunk, enough for header checks."""
    ihdr = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + png_chunk(b"IHDR", ihdr)


def png_with_header(width: int, height: int) -> bytes:
    """8-bit RGB PNG declaring the given size, with a single tiny IDAT."""
    return (
        png_header(width, height, 8, 2)
        + png_chunk(b"IDAT", zlib.compress(b"\x00" * 4))
        + png_chunk(b"IEND", b"")
    )


@pytest.fixture
def quad_buffer() -> PixelBuffer:
    return PixelBuffer.from_array(QUAD_PIXELS)


@pytest.fixture
def quad_png(tmp_path):
    path = tmp_path / "quad.png"
    Image.fromarray(QUAD_PIXELS).save(path)
    return path


@pytest.fixture
def gradient_buffer() -> PixelBuffer:
    """64x48 image whose red channel is x and green channel is y."""
    height, width = 48, 64
    ys, xs = np.mgrid[0:height, 0:width]
    array = np.stack([xs, ys, np.zeros_like(xs)], axis=-1).astype(np.uint8)
    return PixelBuffer.from_array(array)


@pytest.fixture
def config_path(tmp_path):
    """Config location that does not exist yet."""
    return tmp_path / "trimosaic.json"


@pytest.fixture
def oversized_png(tmp_path):
    """PNG whose header declares 20000x20000 pixels."""
    path = tmp_path / "huge.png"
    path.write_bytes(png_with_header(20000, 20000))
    return path
