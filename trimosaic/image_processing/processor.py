"""Main mosaic processor orchestrating the complete pipeline.

Loads a PNG, sizes the triangle grid from the image aspect ratio, walks the
grid sampling one pixel per triangle, and writes the result as SVG.
"""

import logging
from pathlib import Path

from ..models import (
    GridParameters,
    MosaicConfig,
    MosaicDocument,
    PixelBuffer,
    ProcessedMosaic,
)
from .decoding import load_png
from .svg_writer import mosaic_to_svg, write_svg
from .tessellation import build_document, compute_grid_parameters

logger = logging.getLogger(__name__)


class MosaicProcessor:
    """Turns images into triangle mosaics."""

    def __init__(self, config: MosaicConfig | None = None):
        self.config = config or MosaicConfig()

    def load_image(self, file_path: str | Path) -> PixelBuffer:
        """Load and normalize a PNG file to 24-bit RGB."""
        return load_png(file_path)

    def compute_grid(self, pixel_buffer: PixelBuffer) -> GridParameters:
        """Size the triangle grid for an image using the configured rows/height."""
        return compute_grid_parameters(
            pixel_buffer.width,
            pixel_buffer.height,
            self.config.n_vertical,
            self.config.triangle_height,
        )

    def generate(
        self, pixel_buffer: PixelBuffer, params: GridParameters
    ) -> MosaicDocument:
        """Walk the grid into a document in the configured render style."""
        return build_document(pixel_buffer, params, self.config.render_style)

    def render(self, document: MosaicDocument, params: GridParameters) -> str:
        """Serialize a document to SVG markup."""
        return mosaic_to_svg(document, params, self.config)

    def save(
        self,
        document: MosaicDocument,
        params: GridParameters,
        output_path: str | Path | None = None,
    ) -> Path:
        """Render and write a document, defaulting to the configured path."""
        output_path = output_path or self.config.output_path
        return write_svg(self.render(document, params), output_path)

    def process(self, file_path: str | Path) -> ProcessedMosaic:
        """Execute complete mosaic pipeline.

        Args:
            file_path: Path to input PNG

        Returns:
            ProcessedMosaic with the document, grid and statistics
        """
        logger.info("Loading image %s...", file_path)
        pixel_buffer = self.load_image(file_path)
        logger.info(
            "Loaded image with size: %dx%d pixels.",
            pixel_buffer.width,
            pixel_buffer.height,
        )

        params = self.compute_grid(pixel_buffer)
        logger.info(
            "Grid: %d rows x %d columns, triangle height %g, half-base %g",
            params.n_vertical,
            params.n_horizontal,
            params.triangle_height,
            params.half_base_width,
        )

        logger.info("Rendering %s style...", self.config.render_style.value)
        document = self.generate(pixel_buffer, params)

        output_path = self.save(document, params)

        logger.info("Mosaic complete.")
        logger.info(
            "Total triangles: %d (%d up, %d down)",
            len(document),
            document.up_count,
            document.down_count,
        )

        return ProcessedMosaic(
            document=document,
            params=params,
            output_path=output_path,
            original_width=pixel_buffer.width,
            original_height=pixel_buffer.height,
            triangle_count=len(document),
            up_count=document.up_count,
            down_count=document.down_count,
        )
