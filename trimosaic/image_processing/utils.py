"""Pixel sampling and colour helpers used throughout the mosaic pipeline."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import PixelBuffer


def clamp_index(value: int, size: int) -> int:
    """Clamp a computed pixel index to the last valid position."""
    return min(value, size - 1)


def sample_color(
    pixel_buffer: "PixelBuffer", img_x: int, img_y: int
) -> "tuple[int, int, int]":
    """Get the RGB colour of a single pixel.

    Args:
        pixel_buffer: Decoded RGB image
        img_x: X coordinate, 0 <= img_x < width
        img_y: Y coordinate, 0 <= img_y < height

    Returns:
        RGB tuple (0-255 each channel)

    Raises:
        IndexError: If the coordinate lies outside the image
    """
    if not (0 <= img_x < pixel_buffer.width and 0 <= img_y < pixel_buffer.height):
        raise IndexError(
            f"Pixel ({img_x}, {img_y}) outside "
            f"{pixel_buffer.width}x{pixel_buffer.height} image"
        )
    idx = (img_x + img_y * pixel_buffer.width) * 3
    r, g, b = pixel_buffer.data[idx : idx + 3]
    return (r, g, b)


def rgb_to_hex(color: "tuple[int, int, int]") -> str:
    """Encode an RGB tuple as an uppercase ``#RRGGBB`` string."""
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"
