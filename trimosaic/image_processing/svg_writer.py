"""SVG generation for triangle mosaics."""

import logging
from pathlib import Path

import svg

from ..errors import DocumentWriteError
from ..models import GridParameters, MosaicConfig, MosaicDocument, TriangleRecord
from .utils import rgb_to_hex

logger = logging.getLogger(__name__)

OUTLINE_FILL = "transparent"


def triangle_path(
    x: float,
    y: float,
    half_base_width: float,
    height: float,
    points_up: bool,
) -> "list[svg.PathData]":
    """Path commands for one triangle anchored at (x, y).

    Args:
        x: Cell origin X in canvas units
        y: Cell origin Y in canvas units
        half_base_width: Half the base edge length
        height: Row height
        points_up: Triangle orientation

    Returns:
        [move-to, line-by, line-by, close]

    Down triangles start from their bottom apex at ``y + height`` so their
    base lies on ``y`` and is shared with the row above.
    """
    if points_up:
        return [
            svg.MoveTo(x, y),
            svg.LineToRel(-half_base_width, height),
            svg.LineToRel(2 * half_base_width, 0),
            svg.ClosePath(),
        ]
    return [
        svg.MoveTo(x, y + height),
        svg.LineToRel(-half_base_width, -height),
        svg.LineToRel(2 * half_base_width, 0),
        svg.ClosePath(),
    ]


def triangle_to_element(
    record: TriangleRecord,
    params: GridParameters,
    config: MosaicConfig,
) -> svg.Path:
    """Convert a triangle record to an SVG path element.

    Filled triangles are stroked in their own colour so that adjacent
    triangles overlap by a hairline. Records without a colour are drawn as
    outlines.
    """
    d = triangle_path(
        record.x,
        record.y,
        params.half_base_width,
        params.triangle_height,
        record.points_up,
    )

    if record.color is None:
        return svg.Path(
            d=d,
            fill=OUTLINE_FILL,
            stroke=config.outline_color,
            stroke_width=config.stroke_width,
        )

    color = rgb_to_hex(record.color)
    return svg.Path(
        d=d,
        fill=color,
        stroke=color,
        stroke_width=config.stroke_width,
    )


def mosaic_to_svg(
    document: MosaicDocument,
    params: GridParameters,
    config: MosaicConfig,
) -> str:
    """Convert a mosaic document to an SVG string.

    Args:
        document: Triangle records and canvas size
        params: Grid the records were laid out on
        config: Stroke settings

    Returns:
        SVG content as string, one path per record in record order
    """
    elements: list[svg.Element] = [
        triangle_to_element(record, params, config)
        for record in document.records
    ]

    final_svg = svg.SVG(
        viewBox=svg.ViewBoxSpec(0, 0, document.width, document.height),
        elements=elements,
    )
    return final_svg.as_str()


def write_svg(svg_content: str, output_path: "str | Path") -> Path:
    """Persist SVG content.

    Raises:
        DocumentWriteError: If the file cannot be written
    """
    output_path = Path(output_path)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(svg_content)
    except OSError as e:
        raise DocumentWriteError(f"Writing {output_path}: {e}") from e

    logger.info("Saved %s", output_path)
    return output_path
