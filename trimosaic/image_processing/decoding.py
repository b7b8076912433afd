"""PNG decoding and colour normalization.

Every supported PNG flavour ends up as a flat 24-bit RGB ``PixelBuffer``:
alpha is dropped and gray is replicated across the three channels.
"""

import io
import logging
import struct
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import (
    FileOpenError,
    ImageDecodeError,
    UnsupportedBitDepthError,
    UnsupportedColorEncodingError,
)
from ..models import PixelBuffer

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# IHDR colour types we know how to normalize to RGB
GRAYSCALE = 0
RGB = 2
PALETTE = 3
GRAYSCALE_ALPHA = 4
RGBA = 6

SUPPORTED_COLOR_TYPES = {
    GRAYSCALE: "grayscale",
    RGB: "RGB",
    GRAYSCALE_ALPHA: "grayscale+alpha",
    RGBA: "RGBA",
}

SUPPORTED_BIT_DEPTH = 8


def read_png_header(data: bytes) -> "tuple[int, int, int, int]":
    """Read the IHDR chunk of a PNG stream.

    Args:
        data: Encoded PNG bytes

    Returns:
        Tuple of (width, height, bit_depth, color_type)

    Raises:
        ImageDecodeError: If the bytes do not start with a PNG header
    """
    if not data.startswith(PNG_SIGNATURE):
        raise ImageDecodeError("Not a PNG file (bad signature)")

    # signature(8) | length(4) | "IHDR"(4) | width(4) height(4) depth(1) type(1)
    header = data[8:26]
    if len(header) < 18 or header[4:8] != b"IHDR":
        raise ImageDecodeError("PNG is missing its IHDR chunk")

    width, height, bit_depth, color_type = struct.unpack(">IIBB", header[8:18])
    return width, height, bit_depth, color_type


def decode_png(data: bytes) -> PixelBuffer:
    """Decode PNG bytes into a 24-bit RGB pixel buffer.

    Only 8-bit grayscale, RGB, grayscale+alpha and RGBA images are accepted.

    Raises:
        UnsupportedBitDepthError: If the image is not 8 bits per channel
        UnsupportedColorEncodingError: For palette or unknown colour types
        ImageDecodeError: If the data is not a readable PNG, is too large to
            decode safely, or yields no pixels
    """
    width, height, bit_depth, color_type = read_png_header(data)

    if bit_depth != SUPPORTED_BIT_DEPTH:
        raise UnsupportedBitDepthError(f"Bit depth {bit_depth} unsupported!")
    if color_type not in SUPPORTED_COLOR_TYPES:
        raise UnsupportedColorEncodingError(
            f"Images with color type {color_type} are unsupported"
        )

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            rgb_image = image.convert("RGB")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        EOFError,
        ValueError,
    ) as e:
        raise ImageDecodeError(f"Failed to decode image: {e}") from e

    buffer = PixelBuffer.from_array(np.asarray(rgb_image, dtype=np.uint8))
    if buffer.is_empty:
        raise ImageDecodeError("Decoded image contains no pixels")

    logger.debug(
        "Decoded %dx%d %s PNG (header %dx%d)",
        buffer.width,
        buffer.height,
        SUPPORTED_COLOR_TYPES[color_type],
        width,
        height,
    )
    return buffer


def load_png(file_path: "str | Path") -> PixelBuffer:
    """Read and decode a PNG file.

    Raises:
        FileOpenError: If the file cannot be read
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise FileOpenError(f"Opening file {file_path}: {e}") from e
    return decode_png(data)
