"""Triangle grid sizing and traversal.

The grid is made of alternating up and down pointing triangles. Row ``row``
spans ``[row * height, (row + 1) * height]`` and column ``col`` is anchored
at ``col * half_base_width``. Orientation follows the checkerboard parity of
``(row, col)`` so that neighbours always share an edge and the plane is
tiled without gaps.
"""

import logging
import math
from typing import Iterator

from ..errors import EmptyImageError, InvalidInputError
from ..models import (
    GridParameters,
    MosaicDocument,
    PixelBuffer,
    RenderStyle,
    TriangleRecord,
)
from .utils import clamp_index, sample_color

logger = logging.getLogger(__name__)

SQRT_3 = math.sqrt(3)


def compute_grid_parameters(
    image_width: int,
    image_height: int,
    n_vertical: int,
    triangle_height: float,
) -> GridParameters:
    """Size a triangle grid so it roughly keeps the image aspect ratio.

    Args:
        image_width: Image width in pixels
        image_height: Image height in pixels
        n_vertical: Number of triangle rows
        triangle_height: Height of one row in canvas units

    Returns:
        GridParameters with the derived column count and half-base width

    Raises:
        InvalidInputError: If any argument is not positive

    The column count truncates, so a partial column may be left over at the
    right edge. The walk covers it with one extra column.
    """
    if image_width <= 0 or image_height <= 0:
        raise InvalidInputError(
            f"Image dimensions must be positive, got {image_width}x{image_height}"
        )
    if n_vertical <= 0:
        raise InvalidInputError(
            f"Number of vertical triangles must be positive, got {n_vertical}"
        )
    if not (math.isfinite(triangle_height) and triangle_height > 0):
        raise InvalidInputError(
            f"Triangle height must be positive, got {triangle_height}"
        )

    half_base_width = triangle_height / SQRT_3
    n_horizontal = math.floor((image_width * n_vertical // image_height) * SQRT_3)

    return GridParameters(
        n_vertical=n_vertical,
        n_horizontal=n_horizontal,
        triangle_height=triangle_height,
        half_base_width=half_base_width,
    )


def points_up(row: int, col: int) -> bool:
    """Orientation of the triangle in cell (row, col)."""
    return (row % 2 == 0) != (col % 2 == 0)


def triangle_origin(
    row: int, col: int, params: GridParameters
) -> "tuple[float, float]":
    """Canvas-space anchor of a cell."""
    return (col * params.half_base_width, row * params.triangle_height)


def triangle_vertices(
    x: float,
    y: float,
    half_base_width: float,
    height: float,
    is_up: bool,
) -> "tuple[tuple[float, float], tuple[float, float], tuple[float, float]]":
    """Corners of the triangle anchored at (x, y).

    An up triangle has its apex at (x, y) and its base on the row's bottom
    edge. A down triangle has its apex at (x, y + height) and its base on
    the row's top edge, shared with the row above.
    """
    if is_up:
        return (
            (x, y),
            (x - half_base_width, y + height),
            (x + half_base_width, y + height),
        )
    return (
        (x, y + height),
        (x - half_base_width, y),
        (x + half_base_width, y),
    )


def sample_coordinates(
    row: int, col: int, pixel_buffer: PixelBuffer, params: GridParameters
) -> "tuple[int, int]":
    """Nearest source pixel for a cell, clamped to the image bounds."""
    width, height = pixel_buffer.width, pixel_buffer.height
    if params.n_horizontal:
        img_x = clamp_index(col * width // params.n_horizontal, width)
    else:
        # Image so tall that no full column fits: only column 0 exists
        img_x = 0
    img_y = clamp_index(row * height // params.n_vertical, height)
    return img_x, img_y


def iter_triangles(
    pixel_buffer: PixelBuffer,
    params: GridParameters,
    style: RenderStyle = RenderStyle.FILL,
) -> Iterator[TriangleRecord]:
    """Walk the grid row by row, left to right, yielding one record per cell.

    Raises:
        EmptyImageError: If the pixel buffer has no data
    """
    if pixel_buffer.is_empty:
        raise EmptyImageError("Cannot build a mosaic from an empty image")

    sample = style == RenderStyle.FILL

    for row in range(params.n_vertical):
        # Inclusive upper bound covers the partial column at the right edge
        for col in range(params.n_horizontal + 1):
            is_up = points_up(row, col)
            x, y = triangle_origin(row, col, params)
            img_x, img_y = sample_coordinates(row, col, pixel_buffer, params)
            color = sample_color(pixel_buffer, img_x, img_y) if sample else None

            yield TriangleRecord(
                row=row,
                col=col,
                x=x,
                y=y,
                points_up=is_up,
                vertices=triangle_vertices(
                    x, y, params.half_base_width, params.triangle_height, is_up
                ),
                sample_x=img_x,
                sample_y=img_y,
                color=color,
            )


def generate(
    pixel_buffer: PixelBuffer,
    params: GridParameters,
    style: RenderStyle = RenderStyle.FILL,
) -> "list[TriangleRecord]":
    """All triangle records of the grid in row-major order."""
    return list(iter_triangles(pixel_buffer, params, style))


def build_document(
    pixel_buffer: PixelBuffer,
    params: GridParameters,
    style: RenderStyle = RenderStyle.FILL,
) -> MosaicDocument:
    """Walk the grid into a MosaicDocument sized to the grid canvas."""
    canvas_width, canvas_height = params.canvas_size
    document = MosaicDocument(width=canvas_width, height=canvas_height)

    append_record = document.append
    for record in iter_triangles(pixel_buffer, params, style):
        append_record(record)

    logger.debug(
        "Walked %d rows x %d columns into %d of %d triangles",
        params.n_vertical,
        params.n_horizontal + 1,
        len(document),
        params.record_count,
    )
    return document
